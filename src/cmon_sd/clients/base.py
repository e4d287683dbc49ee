from __future__ import annotations

from typing import Any

import httpx
import structlog

from cmon_sd.clients.errors import CmonRequestError

logger = structlog.get_logger()


class BaseHTTPClient:
    """
    Base async HTTP client.

    Keeps a single ``httpx.AsyncClient`` so cookies set by the server persist
    between calls. Each call is a single attempt; failures surface as
    ``CmonRequestError``.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        verify: bool = True,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout,
            verify=verify,
        )

    def _headers(self) -> dict[str, str]:
        """Override to provide custom headers."""
        return {"Content-Type": "application/json"}

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Execute one HTTP request and decode the JSON body."""
        url = f"{self._base_url}{path}"
        req_headers = self._headers()
        if headers:
            req_headers.update(headers)

        try:
            response = await self._http.request(method, path, json=json, headers=req_headers)
            response.raise_for_status()
            data = response.json() if response.content else {}
        except httpx.HTTPStatusError as exc:
            logger.error(
                "http_permanent_error",
                status=exc.response.status_code,
                method=method,
                url=url,
                error=str(exc),
            )
            raise CmonRequestError(
                f"{method} {url} failed with HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("http_network_error", method=method, url=url, error=str(exc))
            raise CmonRequestError(str(exc) or exc.__class__.__name__) from exc
        except ValueError as exc:
            logger.error("http_invalid_json", method=method, url=url, error=str(exc))
            raise CmonRequestError(f"invalid JSON from {url}: {exc}") from exc

        if not isinstance(data, dict):
            raise CmonRequestError(f"unexpected reply from {url}: expected a JSON object")
        return data

    async def post(
        self,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Execute POST request."""
        return await self._request("POST", path, json=json, headers=headers)

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()
