from dataclasses import dataclass

EMBED_URL = "https://open.spotify.com/embed/track/"

@dataclass(frozen=True)
class TrackMatch:
    track_id: str
    name: str
    artist_name: str
    spotify_url: str

    @property
    def embed_url(self) -> str:
        return f"{EMBED_URL}{self.track_id}?utm_source=generator"

    @property
    def embed_code(self) -> str:
        return (
            f'<iframe data-testid="embed-iframe" style="border-radius:12px" '
            f'src="{self.embed_url}" width="100%" height="152" frameBorder="0" allowfullscreen="" '
            f'allow="autoplay; clipboard-write; encrypted-media; fullscreen; picture-in-picture" '
            f'loading="lazy"></iframe>'
        )


    def to_response(self, query: str, location: str | None) -> dict:
        return {
            "query": query,
            "location": location or "global",
            "track_name": self.name,
            "artist_name": self.artist_name,
            "spotify_url": self.spotify_url,
            "track_id": self.track_id,
            "embed_code": self.embed_code,
        }
