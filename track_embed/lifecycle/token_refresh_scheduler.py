"""
Hourly background refresh of the Spotify app token.

Runs on the same event loop as the web server through APScheduler's
AsyncIOScheduler, so `start()` must be called from inside the running loop
(the app lifespan does this). The job always refreshes, whatever the current
token's expiry, and shares nothing with request-driven refreshes except the
credential store.
"""

from apscheduler.events import EVENT_JOB_ERROR, EVENT_JOB_EXECUTED, EVENT_JOB_MISSED
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from track_embed.config.logger import logger
from track_embed.services.providers.spotify_auth_service import CredentialManager
from track_embed.services.providers.spotify_errors import CredentialAcquisitionError

TOKEN_REFRESH_JOB_ID = "spotify_token_refresh"

def _on_job_executed(event):
    logger.info(f"Job {event.job_id} executed successfully")


def _on_job_error(event):
    logger.error(f"Job {event.job_id} failed with exception: {event.exception}")


def _on_job_missed(event):
    logger.warning(f"Job {event.job_id} missed its scheduled run time")


class TokenRefreshScheduler:
    def __init__(self, credential_manager: CredentialManager, scheduler: AsyncIOScheduler | None = None):
        self.credential_manager = credential_manager
        self.scheduler = scheduler or AsyncIOScheduler(
            job_defaults={
                "coalesce": True,
                "max_instances": 1,
                "misfire_grace_time": 300,
            }
        )


    async def refresh_credential(self):
        logger.info("🔄 Scheduled token refresh...")
        try:
            await self.credential_manager.acquire()
        except CredentialAcquisitionError as e:
            # The previous token stays in place until the next request or tick
            logger.warning(f"Scheduled token refresh failed: {e}")


    def start(self):
        if self.scheduler.running:
            logger.warning("Token refresh scheduler already running, skipping start")
            return

        self.scheduler.add_job(
            self.refresh_credential,
            trigger=CronTrigger(minute=0),
            id=TOKEN_REFRESH_JOB_ID,
            replace_existing=True,
        )
        self.scheduler.add_listener(_on_job_executed, EVENT_JOB_EXECUTED)
        self.scheduler.add_listener(_on_job_error, EVENT_JOB_ERROR)
        self.scheduler.add_listener(_on_job_missed, EVENT_JOB_MISSED)

        self.scheduler.start()
        logger.info("Token refresh scheduler started, refreshing at the top of every hour")


    def shutdown(self):
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            logger.info("Token refresh scheduler stopped")
