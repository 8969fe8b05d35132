import httpx

from track_embed.clients.http_client import HTTPClient
from track_embed.services.providers.spotify_errors import TransportError

METHOD_ARGUMENTS = {
    "GET": {"params"},
    "POST": {"params", "data"},
}

async def send_request(
    method: str,
    url: str,
    params: dict = None,
    headers: dict = None,
    auth: tuple = None,
    data: dict = None
) -> httpx.Response:
    """Issues a single request on the shared client; there is no retry.

    Transport failures surface as `TransportError`. Non-2xx responses are
    returned as-is so the caller can decide which error they map to.
    """
    method = method.upper()
    allowed_args = METHOD_ARGUMENTS.get(method)
    if allowed_args is None:
        raise ValueError(f"Unsupported HTTP method: {method}")
    if data is not None and "data" not in allowed_args:
        raise ValueError(f"{method} requests cannot have a body")

    kwargs = {"headers": headers, "auth": auth}
    if params is not None:
        kwargs["params"] = params
    if data is not None:
        kwargs["data"] = data

    try:
        return await HTTPClient().request(method, url, **kwargs)
    except httpx.HTTPError as e:
        raise TransportError(f"{method} {url} failed: {type(e).__name__}: {e}") from e


def parse_json(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError as e:
        raise TransportError(f"Malformed response body (status {response.status_code})") from e

    if not isinstance(body, dict):
        raise TransportError("Expected a JSON object in the response body")
    return body
