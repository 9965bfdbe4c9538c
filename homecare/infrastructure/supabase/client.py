from __future__ import annotations

import logging
from typing import Any, Callable

import httpx

from homecare.application.exceptions import BackendError


class SupabaseClient:
    """The one configured handle to the hosted auth + database service."""

    def __init__(
        self,
        url: str,
        anon_key: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not url or not anon_key:
            raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY are required for the Supabase backend")
        self._anon_key = anon_key
        self._client = httpx.Client(
            base_url=url.rstrip("/"),
            timeout=timeout,
            transport=transport,
            headers={"apikey": anon_key},
        )
        self.access_token: str | None = None
        self.refresh_token: str | None = None
        # set by the auth adapter; returns True when a fresh access token is in place
        self.on_unauthorized: Callable[[], bool] | None = None
        self._logger = logging.getLogger(__name__)

    def set_session(self, access_token: str | None, refresh_token: str | None = None) -> None:
        self.access_token = access_token
        self.refresh_token = refresh_token

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
        error_cls: type[BackendError] = BackendError,
        retry_unauthorized: bool = True,
    ) -> httpx.Response:
        resp = self._send(method, path, params=params, json=json, headers=headers, error_cls=error_cls)

        if resp.status_code >= 400:
            code, message = _parse_error(resp)
            if (
                retry_unauthorized
                and _is_expired_token(resp.status_code, code)
                and self.refresh_token
                and self.on_unauthorized is not None
                and self.on_unauthorized()
            ):
                return self.request(
                    method,
                    path,
                    params=params,
                    json=json,
                    headers=headers,
                    error_cls=error_cls,
                    retry_unauthorized=False,
                )
            self._logger.error(
                "Supabase request rejected",
                extra={"path": path, "status": resp.status_code, "error_code": code, "error": message},
            )
            raise error_cls(message, code=code, status=resp.status_code)
        return resp

    def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None,
        json: Any,
        headers: dict[str, str] | None,
        error_cls: type[BackendError],
    ) -> httpx.Response:
        request_headers = {"Authorization": f"Bearer {self.access_token or self._anon_key}"}
        request_headers.update(headers or {})
        try:
            return self._client.request(method, path, params=params, json=json, headers=request_headers)
        except httpx.HTTPError as e:
            self._logger.error("Supabase request failed", extra={"path": path, "error": str(e)})
            raise error_cls(str(e)) from e

    def close(self) -> None:
        self._client.close()


EXPIRED_TOKEN_CODES = {"PGRST301", "bad_jwt"}


def _is_expired_token(status: int, code: str | None) -> bool:
    return status == 401 or code in EXPIRED_TOKEN_CODES


def _parse_error(resp: httpx.Response) -> tuple[str | None, str]:
    try:
        body = resp.json()
    except ValueError:
        return None, resp.text or f"HTTP {resp.status_code}"
    if not isinstance(body, dict):
        return None, resp.text

    # GoTrue uses error_code/msg (or error/error_description), PostgREST code/message
    code = body.get("error_code") or body.get("code") or body.get("error")
    message = (
        body.get("msg")
        or body.get("message")
        or body.get("error_description")
        or resp.text
    )
    return (str(code) if code is not None else None), str(message)
