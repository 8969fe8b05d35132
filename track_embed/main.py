import logging.config

import uvicorn
from fastapi import FastAPI

from track_embed.config.logger import LOGGING_CONFIG, logger
from track_embed.config.settings import Settings

from track_embed.clients.http_client import HTTPClient

from track_embed.middleware.correlation_id import CorrelationIdMiddleware

from track_embed.routes.pages import pages_router
from track_embed.routes.tracks import tracks_router
from track_embed.lifecycle.lifespan_manager import create_lifespan
from track_embed.lifecycle.token_refresh_scheduler import TokenRefreshScheduler

from track_embed.models.credential import ApplicationIdentity
from track_embed.services.credential_store import CredentialStore
from track_embed.services.providers.spotify_auth_service import CredentialManager
from track_embed.services.providers.spotify_errors import CredentialAcquisitionError
from track_embed.services.providers.spotify_service import SpotifyService
from track_embed.utils.credential_helpers import token_file_writer

logging.config.dictConfig(LOGGING_CONFIG)

credential_store = CredentialStore()
credential_manager = CredentialManager(
    ApplicationIdentity(Settings.SPOTIFY_CLIENT_ID, Settings.SPOTIFY_CLIENT_SECRET),
    credential_store,
    observers=[token_file_writer(Settings.TOKEN_FILE_PATH)]
)
spotify_service = SpotifyService(credential_store, credential_manager)
token_refresh_scheduler = TokenRefreshScheduler(credential_manager)

async def on_startup():
    try:
        await credential_manager.acquire()
    except CredentialAcquisitionError:
        logger.warning("Starting without a Spotify token, the first search will request one")
    token_refresh_scheduler.start()

async def on_shutdown():
    token_refresh_scheduler.shutdown()
    await HTTPClient.aclose()

lifespan = create_lifespan(
    on_startup=on_startup,
    on_shutdown=on_shutdown
)

# /docs is the location code listing, not Swagger
app = FastAPI(lifespan=lifespan, docs_url=None, redoc_url=None)
app.state.spotify_service = spotify_service
app.add_middleware(CorrelationIdMiddleware)
app.include_router(pages_router)
app.include_router(tracks_router)

def run():
    logger.info(f"🚀 Server running on http://{Settings.HOST}:{Settings.PORT}")
    uvicorn.run("track_embed.main:app", host=Settings.HOST, port=Settings.PORT, log_config=LOGGING_CONFIG)

if __name__ == "__main__":
    run()
