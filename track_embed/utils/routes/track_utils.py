from track_embed.models.track_match import TrackMatch
from track_embed.services.providers.spotify_errors import TrackIdExtractionError

TRACK_PATH_SEGMENT = "/track/"

def extract_track_id(spotify_url: str | None) -> str | None:
    if not spotify_url or TRACK_PATH_SEGMENT not in spotify_url:
        return None

    track_id = spotify_url.split(TRACK_PATH_SEGMENT, 1)[1].split("?", 1)[0]
    return track_id or None


def resolve_first_track(search_results: dict) -> TrackMatch | None:
    """Returns the first track of a search response, or None if there were no hits.

    Raises `TrackIdExtractionError` when a hit exists but its URL cannot be
    turned into a track id.
    """
    tracks = (search_results or {}).get("tracks") or {}
    items = tracks.get("items") or []
    if not items:
        return None

    first_track = items[0]
    if not isinstance(first_track, dict):
        raise TrackIdExtractionError(None)

    spotify_url = (first_track.get("external_urls") or {}).get("spotify")
    track_id = extract_track_id(spotify_url)
    if not track_id:
        raise TrackIdExtractionError(spotify_url)

    artists = first_track.get("artists") or []
    return TrackMatch(
        track_id=track_id,
        name=first_track.get("name", ""),
        artist_name=artists[0].get("name", "") if artists else "",
        spotify_url=spotify_url
    )
