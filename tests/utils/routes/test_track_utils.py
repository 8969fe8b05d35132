import pytest

from tests.helpers import make_search_results
from track_embed.models.track_match import TrackMatch
from track_embed.services.providers.spotify_errors import TrackIdExtractionError
from track_embed.utils.routes.track_utils import extract_track_id, resolve_first_track

@pytest.mark.parametrize("url, expected", [
    ("https://open.spotify.com/track/abc123?si=xyz", "abc123"),
    ("https://open.spotify.com/track/abc123", "abc123"),
    ("https://open.spotify.com/intl-tr/track/4uLU6hMCjMI75M1A2tKUQC?si=1", "4uLU6hMCjMI75M1A2tKUQC"),
    ("https://open.spotify.com/album/abc123", None),
    ("https://open.spotify.com/track/", None),
    ("", None),
    (None, None),
])
def test_extract_track_id(url, expected):
    assert extract_track_id(url) == expected

def test_resolve_first_track():
    search_results = make_search_results(
        "https://open.spotify.com/track/abc123?si=xyz",
        "https://open.spotify.com/track/def456",
    )

    assert resolve_first_track(search_results) == TrackMatch(
        track_id="abc123",
        name="Track 0",
        artist_name="Artist 0",
        spotify_url="https://open.spotify.com/track/abc123?si=xyz"
    )

@pytest.mark.parametrize("search_results", [
    {"tracks": {"items": []}},
    {"tracks": {}},
    {"tracks": None},
    {},
])
def test_resolve_first_track_not_found(search_results):
    assert resolve_first_track(search_results) is None

@pytest.mark.parametrize("track", [
    {"name": "Odd", "artists": [], "external_urls": {"spotify": "https://open.spotify.com/album/xyz"}},
    {"name": "Odd", "artists": [], "external_urls": {}},
    {"name": "Odd", "artists": []},
])
def test_resolve_first_track_inconsistent_url(track):
    with pytest.raises(TrackIdExtractionError):
        resolve_first_track({"tracks": {"items": [track]}})

def test_resolve_first_track_without_artists():
    track = {"name": "Untitled", "artists": [], "external_urls": {"spotify": "https://open.spotify.com/track/abc"}}

    assert resolve_first_track({"tracks": {"items": [track]}}).artist_name == ""

@pytest.mark.parametrize("first_item", [None, "not a track", 42])
def test_resolve_first_track_malformed_item(first_item):
    with pytest.raises(TrackIdExtractionError) as exc_info:
        resolve_first_track({"tracks": {"items": [first_item]}})

    assert exc_info.value.spotify_url is None
