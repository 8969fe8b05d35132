from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse

from track_embed.config.logger import logger
from track_embed.config.settings import SUPPORTED_LOCATIONS
from track_embed.dependencies.spotify_service import get_spotify_service
from track_embed.models.schemas.location_params import LocationParams
from track_embed.routes.templating import templates
from track_embed.services.providers.spotify_errors import SpotifyServiceError, TrackIdExtractionError
from track_embed.services.providers.spotify_service import SpotifyService
from track_embed.utils.routes.track_utils import resolve_first_track

tracks_router = APIRouter()

@tracks_router.get("/song/{query:path}")
async def get_song(
    query: str,
    location_params: LocationParams = Depends(),
    spotify_service: SpotifyService = Depends(get_spotify_service)
):
    location = location_params.location
    if not location_params.is_supported:
        return JSONResponse(status_code=400, content={
            "error": f"Unsupported location: {location}",
            "supported_locations": list(SUPPORTED_LOCATIONS)
        })

    try:
        search_results = await spotify_service.search_tracks(query, location)
    except SpotifyServiceError as e:
        logger.error(f"Search for {query!r} failed: {e}")
        return JSONResponse(status_code=502, content={
            "error": "Spotify search failed",
            "query": query,
            "location": location or "global"
        })

    try:
        track = resolve_first_track(search_results)
    except TrackIdExtractionError as e:
        logger.error(str(e))
        return JSONResponse(status_code=500, content={
            "error": "Could not extract track ID",
            "query": query
        })

    if track is None:
        return JSONResponse(status_code=404, content={
            "error": "No tracks found",
            "query": query,
            "location": location or "global"
        })

    return track.to_response(query, location)


@tracks_router.get("/view/{query:path}", response_class=HTMLResponse)
async def view_song(
    request: Request,
    query: str,
    location_params: LocationParams = Depends(),
    spotify_service: SpotifyService = Depends(get_spotify_service)
):
    location = location_params.location

    def render_error(title: str, message: str, **context):
        return templates.TemplateResponse(request, "error.html", {
            "title": title,
            "message": message,
            **context
        })

    if not location_params.is_supported:
        return render_error(
            "Unsupported Location",
            f"Unsupported location: {location}",
            supported_locations=list(SUPPORTED_LOCATIONS)
        )

    try:
        search_results = await spotify_service.search_tracks(query, location)
    except SpotifyServiceError as e:
        logger.error(f"Search for {query!r} failed: {e}")
        return render_error("Search Failed", f'Could not search Spotify for "{query}"')

    try:
        track = resolve_first_track(search_results)
    except TrackIdExtractionError as e:
        logger.error(str(e))
        return render_error("Error", "Could not extract track ID")

    if track is None:
        return render_error(
            "Track Not Found",
            f'No tracks found for "{query}"',
            location_name=location_params.country_name
        )

    return templates.TemplateResponse(request, "player.html", {
        "track": track,
        "location_name": location_params.country_name
    })
