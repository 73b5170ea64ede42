from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from webex_poster.config import settings
from webex_poster.errors import ApiError, TransportError

logger = logging.getLogger(__name__)

JsonValue = Any


def _error_message(resp: httpx.Response) -> str:
    text = resp.text
    try:
        data = resp.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    if text:
        return text
    return f"{resp.status_code} {resp.reason_phrase}".strip()


def decode_json(resp: httpx.Response) -> JsonValue:
    if not resp.content:
        return {}
    try:
        return resp.json()
    except ValueError as exc:
        raise ApiError(resp.status_code, "invalid JSON response") from exc


class WebexClient:
    def __init__(
        self,
        token: str,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.token = (token or "").strip()
        self.base_url = base_url or settings.WEBEX_API_BASE
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT_SECONDS
        self._transport = transport

    def _headers(self, has_body: bool) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {self.token}"}
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Issue one request and return the response if its status is 2xx.

        ``path`` is joined onto the base URL unless it is already absolute,
        which is how pagination continuation links are followed.
        """
        logger.debug("webex request", extra={"method": method, "path": path})
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                resp = await client.request(
                    method,
                    path,
                    params=params,
                    json=json,
                    headers=self._headers(json is not None),
                )
            except httpx.RequestError as exc:
                raise TransportError(str(exc) or exc.__class__.__name__) from exc
        if not resp.is_success:
            message = _error_message(resp)
            logger.info(
                "webex request failed",
                extra={"method": method, "path": path, "status": resp.status_code},
            )
            raise ApiError(resp.status_code, message)
        return resp

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> JsonValue:
        resp = await self.send(method, path, params=params, json=json)
        return decode_json(resp)

    async def get(
        self, path: str, *, params: Optional[Dict[str, Any]] = None
    ) -> JsonValue:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, payload: Dict[str, Any]) -> JsonValue:
        return await self.request("POST", path, json=payload)

    async def delete(self, path: str) -> JsonValue:
        return await self.request("DELETE", path)
