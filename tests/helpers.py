import httpx

TOKEN_URL = "https://accounts.spotify.com/api/token"
SEARCH_URL = "https://api.spotify.com/v1/search"

def make_response(status_code: int, json: dict = None, content: bytes = None) -> httpx.Response:
    if json is not None:
        return httpx.Response(status_code, json=json)
    return httpx.Response(status_code, content=content or b"")


def make_search_results(*urls: str) -> dict:
    return {
        "tracks": {
            "items": [
                {
                    "name": f"Track {index}",
                    "artists": [{"name": f"Artist {index}"}],
                    "external_urls": {"spotify": url}
                }
                for index, url in enumerate(urls)
            ]
        }
    }
