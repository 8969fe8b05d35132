import time
from datetime import datetime, timezone

from track_embed.config.logger import logger
from track_embed.models.credential import ApplicationIdentity, Credential
from track_embed.services.credential_store import CredentialStore
from track_embed.services.providers.spotify_errors import (
    ConfigurationError,
    TokenTransportError,
    TransportError,
    UpstreamRejectedError,
)
from track_embed.utils.http_helpers import parse_json, send_request

TOKEN_URL = "https://accounts.spotify.com/api/token"

DEFAULT_EXPIRES_IN = 3600
EXPIRY_MARGIN_SECONDS = 60

class CredentialManager:
    """Obtains client-credentials tokens and publishes them to the store.

    Several callers may run `acquire` at the same time (a request that found
    the token stale and the hourly job, for instance). They are not
    coalesced; each one that succeeds replaces the stored credential and the
    last to finish wins.
    """

    def __init__(self, identity: ApplicationIdentity, credential_store: CredentialStore, observers=None):
        self.identity = identity
        self.credential_store = credential_store
        self.observers = list(observers or [])


    async def acquire(self) -> Credential:
        if not self.identity.is_complete:
            logger.error("❌ SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET environment variables must be set")
            raise ConfigurationError("Spotify application identity is not configured")

        try:
            response = await send_request(
                "POST",
                TOKEN_URL,
                auth=(self.identity.client_id, self.identity.client_secret),
                data={"grant_type": "client_credentials"}
            )
        except TransportError as e:
            logger.error(f"❌ Error getting token: {e}")
            raise TokenTransportError(str(e)) from e

        if not response.is_success:
            logger.error(f"❌ Failed to get token: {response.status_code}")
            raise UpstreamRejectedError(response.status_code)

        try:
            credential = self._build_credential(parse_json(response))
        except TransportError as e:
            logger.error(f"❌ Error reading token response: {e}")
            raise TokenTransportError(str(e)) from e

        self.credential_store.set(credential)
        await self._notify_observers(credential)

        expires_at = datetime.fromtimestamp(credential.expires_at, tz=timezone.utc).isoformat()
        logger.info(f"✅ Token refreshed, valid until {expires_at}")
        return credential


    def _build_credential(self, token_data: dict) -> Credential:
        access_token = token_data.get("access_token")
        if not isinstance(access_token, str) or not access_token:
            raise TransportError("Token response has no access_token")

        try:
            expires_in = float(token_data.get("expires_in") or DEFAULT_EXPIRES_IN)
        except (TypeError, ValueError) as e:
            raise TransportError(f"Invalid expires_in: {token_data.get('expires_in')!r}") from e

        return Credential(
            token=access_token,
            expires_at=time.time() + expires_in - EXPIRY_MARGIN_SECONDS
        )


    async def _notify_observers(self, credential: Credential):
        for observer in self.observers:
            try:
                await observer(credential)
            except Exception as e:
                logger.warning(f"Post-acquisition hook {getattr(observer, '__name__', observer)!r} failed: {e}")
