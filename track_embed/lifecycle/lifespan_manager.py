from contextlib import asynccontextmanager
import inspect

from track_embed.config.logger import logger

async def _run_hook(hook):
    if hook:
        await hook() if inspect.iscoroutinefunction(hook) else hook()


def create_lifespan(on_startup=None, on_shutdown=None):
    @asynccontextmanager
    async def lifespan(app):
        logger.info("🎵 Starting Spotify track embed service...")
        await _run_hook(on_startup)

        yield

        logger.info("🛑 Shutting down.")
        await _run_hook(on_shutdown)

    return lifespan
