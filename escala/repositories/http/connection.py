"""HTTP connection to the backend API."""

from typing import Any, Optional

import httpx

from ...config import logger as log
from ...config.env import get_api_url, get_http_timeout
from ...errors import ApiError


def parse_collection(data: Any) -> list[dict]:
    """Accepts a bare JSON array or a paginated ``{"data": [...], "total": n}`` body."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("data"), list):
        return data["data"]
    raise ApiError("Formato de dados inválido")


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    text = response.text.strip()
    return text or f"Erro HTTP: {response.status_code}"


class HTTPConnection:
    """Wraps an ``httpx.AsyncClient`` bound to the configured API base URL.

    All repositories share one connection, so the three list requests of a
    snapshot load go out over the same client.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initializes the connection.

        Args:
            base_url: API root. Uses ESCALA_API_URL if not specified.
            timeout: Seconds per request. Uses ESCALA_HTTP_TIMEOUT if not specified.
            transport: Custom httpx transport (tests pass a MockTransport).
        """
        self.base_url = (base_url or get_api_url()).rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url + "/",
            timeout=timeout if timeout is not None else get_http_timeout(),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "HTTPConnection":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(self, method: str, path: str, json: Any = None) -> Any:
        """Sends a request and returns the decoded JSON body, or None if empty.

        Raises:
            ApiError: On connection failure, non-2xx status, or a non-JSON body.
        """
        log.debug("http", f"{method} {path}")
        try:
            response = await self._client.request(method, path.lstrip("/"), json=json)
        except httpx.HTTPError as e:
            log.error("http", "Request failed", method=method, path=path, error=str(e))
            raise ApiError(f"Erro de conexão: {e}") from e

        if response.is_error:
            message = _error_message(response)
            log.error("http", "API error", method=method, path=path, status=response.status_code, detail=message)
            raise ApiError(message, status_code=response.status_code)

        if not response.content or not response.content.strip():
            return None

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            raise ApiError("Resposta não é JSON", status_code=response.status_code)
        try:
            return response.json()
        except ValueError as e:
            raise ApiError("Resposta não é JSON", status_code=response.status_code) from e

    async def get(self, path: str) -> Any:
        return await self.request("GET", path)

    async def post(self, path: str, json: Any) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any) -> Any:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> None:
        await self.request("DELETE", path)
