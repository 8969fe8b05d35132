import time

from track_embed.config.logger import logger
from track_embed.services.credential_store import CredentialStore
from track_embed.services.providers.spotify_auth_service import CredentialManager
from track_embed.services.providers.spotify_errors import (
    CredentialAcquisitionError,
    NoCredentialError,
    TransportError,
    UpstreamSearchFailedError,
)
from track_embed.utils.credential_helpers import needs_refresh
from track_embed.utils.http_helpers import parse_json, send_request

SEARCH_URL = "https://api.spotify.com/v1/search"
SEARCH_LIMIT = 5

class SpotifyService:
    def __init__(self, credential_store: CredentialStore, credential_manager: CredentialManager):
        self.credential_store = credential_store
        self.credential_manager = credential_manager


    async def get_access_token(self) -> str:
        credential = self.credential_store.get()
        if needs_refresh(credential, time.time()):
            try:
                credential = await self.credential_manager.acquire()
            except CredentialAcquisitionError as e:
                raise NoCredentialError("No Spotify access token available") from e

        return credential.token


    async def search_tracks(self, query: str, market: str | None = None) -> dict:
        # A token that expires between this check and the search is not retried
        access_token = await self.get_access_token()

        headers = { "Authorization": f"Bearer {access_token}" }
        params = { "q": query, "type": "track", "limit": SEARCH_LIMIT }
        if market:
            params["market"] = market.upper()

        try:
            response = await send_request("GET", SEARCH_URL, params=params, headers=headers)
        except TransportError as e:
            logger.error(f"❌ Search error: {e}")
            raise

        if not response.is_success:
            logger.error(f"❌ Search failed: {response.status_code}")
            raise UpstreamSearchFailedError(response.status_code)

        return parse_json(response)
