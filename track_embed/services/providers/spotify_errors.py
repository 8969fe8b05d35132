class SpotifyServiceError(Exception):
    """Base class for every failure talking to Spotify."""


class CredentialAcquisitionError(SpotifyServiceError):
    """A client-credentials token could not be obtained."""


class ConfigurationError(CredentialAcquisitionError):
    """The application identity is missing, so no request was attempted."""


class UpstreamRejectedError(CredentialAcquisitionError):
    def __init__(self, status_code: int):
        super().__init__(f"Spotify token request rejected with status {status_code}")
        self.status_code = status_code


class TransportError(SpotifyServiceError):
    """Network failure or an unreadable response body."""


class TokenTransportError(TransportError, CredentialAcquisitionError):
    """The token request failed in transit or returned an unreadable body."""


class NoCredentialError(SpotifyServiceError):
    """A search was requested but no usable token could be obtained."""


class UpstreamSearchFailedError(SpotifyServiceError):
    def __init__(self, status_code: int):
        super().__init__(f"Spotify search failed with status {status_code}")
        self.status_code = status_code


class TrackIdExtractionError(Exception):
    """The search succeeded but the first track's URL has no `/track/` segment."""

    def __init__(self, spotify_url: str | None):
        super().__init__(f"Could not extract track ID from {spotify_url!r}")
        self.spotify_url = spotify_url
