import asyncio
from pathlib import Path

from track_embed.models.credential import Credential

def needs_refresh(credential: Credential | None, now: float) -> bool:
    if credential is None:
        return True
    return now >= credential.expires_at


def token_file_writer(path: str | Path):
    """Builds an acquisition observer that dumps the raw token to `path`."""
    token_path = Path(path)

    async def write_token(credential: Credential):
        await asyncio.to_thread(token_path.write_text, credential.token)

    return write_token
