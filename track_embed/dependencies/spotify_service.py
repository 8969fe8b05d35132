from fastapi import Request

from track_embed.services.providers.spotify_service import SpotifyService

def get_spotify_service(request: Request) -> SpotifyService:
    return request.app.state.spotify_service
