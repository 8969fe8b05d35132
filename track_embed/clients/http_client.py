import httpx

class HTTPClient:
    _client: httpx.AsyncClient | None = None

    def __new__(cls):
        if cls._client is None or cls._client.is_closed:
            cls._client = httpx.AsyncClient(timeout=30.0)
        return cls._client


    @classmethod
    async def aclose(cls):
        if cls._client is not None:
            await cls._client.aclose()
            cls._client = None
