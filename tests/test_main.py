import pytest
from unittest.mock import AsyncMock, patch

from track_embed import main
from track_embed.services.providers.spotify_errors import ConfigurationError

@pytest.mark.asyncio
async def test_startup_acquires_token_and_starts_scheduler():
    with patch.object(main.credential_manager, "acquire", new_callable=AsyncMock) as mock_acquire, \
         patch.object(main.token_refresh_scheduler, "start") as mock_start:
        await main.on_startup()

        mock_acquire.assert_awaited_once()
        mock_start.assert_called_once()

@pytest.mark.asyncio
async def test_startup_survives_missing_identity():
    with patch.object(main.credential_manager, "acquire", new_callable=AsyncMock) as mock_acquire, \
         patch.object(main.token_refresh_scheduler, "start") as mock_start:
        mock_acquire.side_effect = ConfigurationError("missing identity")

        await main.on_startup()

        mock_start.assert_called_once()

@pytest.mark.asyncio
async def test_shutdown_stops_scheduler_and_client():
    with patch.object(main.token_refresh_scheduler, "shutdown") as mock_shutdown, \
         patch.object(main.HTTPClient, "aclose", new_callable=AsyncMock) as mock_aclose:
        await main.on_shutdown()

        mock_shutdown.assert_called_once()
        mock_aclose.assert_awaited_once()

def test_app_wires_shared_store():
    assert main.spotify_service.credential_store is main.credential_store
    assert main.credential_manager.credential_store is main.credential_store
    assert main.token_refresh_scheduler.credential_manager is main.credential_manager
    assert main.app.state.spotify_service is main.spotify_service
