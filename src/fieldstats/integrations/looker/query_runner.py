"""Looker API query runner.

Runs inline queries through the Looker API 4.0 ``queries/run/json_detail``
endpoint using :mod:`httpx`. Settings come from constructor arguments and
fall back to the environment variables the Looker SDKs use:
  - LOOKERSDK_BASE_URL
  - LOOKERSDK_CLIENT_ID / LOOKERSDK_CLIENT_SECRET
  - LOOKERSDK_VERIFY_SSL
  - LOOKERSDK_TIMEOUT
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import time
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from fieldstats.capabilities.query_runner import (
    InlineQuery,
    QueryResponse,
    QueryRunner,
)
from fieldstats.core.errors import InvalidQueryResponseError, QueryExecutionError

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


class LookerQueryRunner(QueryRunner):
    """Looker-backed query runner.

    Args:
        base_url: Instance URL (e.g. "https://example.looker.com:19999");
            falls back to env `LOOKERSDK_BASE_URL`.
        client_id: API3 client id; falls back to env `LOOKERSDK_CLIENT_ID`.
        client_secret: API3 client secret; falls back to env
            `LOOKERSDK_CLIENT_SECRET`.
        access_token: Pre-issued token; skips the login call when given.
        verify_ssl: Verify TLS certificates; env `LOOKERSDK_VERIFY_SSL`.
        timeout: Request timeout in seconds; env `LOOKERSDK_TIMEOUT`.
        transport: Optional httpx transport (used by tests).
    """

    API_VERSION = "4.0"
    DEFAULT_TIMEOUT = 120.0
    RESULT_FORMAT = "json_detail"

    def __init__(
        self,
        base_url: Optional[str] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        *,
        access_token: Optional[str] = None,
        verify_ssl: Optional[bool] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        base_url = base_url or os.getenv("LOOKERSDK_BASE_URL")
        if not base_url:
            raise ValueError(
                "Looker base URL is required (pass base_url or set LOOKERSDK_BASE_URL)"
            )
        self.client_id = client_id or os.getenv("LOOKERSDK_CLIENT_ID")
        self.client_secret = client_secret or os.getenv("LOOKERSDK_CLIENT_SECRET")
        if not access_token and not (self.client_id and self.client_secret):
            raise ValueError(
                "Looker credentials are required (pass access_token, or client_id "
                "and client_secret, or set LOOKERSDK_CLIENT_ID/LOOKERSDK_CLIENT_SECRET)"
            )

        if verify_ssl is None:
            verify_ssl = _env_flag("LOOKERSDK_VERIFY_SSL", True)
        if timeout is None:
            timeout = _env_float("LOOKERSDK_TIMEOUT", self.DEFAULT_TIMEOUT)

        self.api_url = f"{base_url.rstrip('/')}/api/{self.API_VERSION}"
        self._access_token = access_token
        self._token_expires_at: Optional[float] = None
        self._login_lock = asyncio.Lock()
        self._client = httpx.AsyncClient(
            verify=verify_ssl, timeout=timeout, transport=transport
        )

    async def __aenter__(self) -> "LookerQueryRunner":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def run_inline_query(self, query: InlineQuery) -> QueryResponse:
        token = await self._get_token()
        try:
            response = await self._post_query(query, token)
            if response.status_code == 401 and self._has_credentials():
                logger.info("Looker rejected the access token, logging in again")
                token = await self._refresh_token(token)
                response = await self._post_query(query, token)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise QueryExecutionError(
                f"Looker query failed with status {exc.response.status_code}: "
                f"{exc.response.text}"
            ) from exc
        except httpx.HTTPError as exc:
            raise QueryExecutionError(f"Looker query request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise InvalidQueryResponseError("Looker returned a non-JSON body") from exc

        if isinstance(payload, dict) and payload.get("errors"):
            messages = [
                str(e.get("message", e)) if isinstance(e, dict) else str(e)
                for e in payload["errors"]
            ]
            raise QueryExecutionError("Looker query error: " + "; ".join(messages))

        try:
            return QueryResponse.model_validate(payload)
        except ValidationError as exc:
            raise InvalidQueryResponseError(
                f"Unexpected Looker response shape: {exc}"
            ) from exc

    async def _post_query(self, query: InlineQuery, token: str) -> httpx.Response:
        params: Dict[str, Any] = {}
        if query.limit is not None:
            params["limit"] = query.limit
        return await self._client.post(
            f"{self.api_url}/queries/run/{self.RESULT_FORMAT}",
            params=params,
            json=self._query_body(query),
            headers={"Authorization": f"token {token}"},
        )

    @staticmethod
    def _query_body(query: InlineQuery) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "model": query.model,
            "view": query.view,
            "fields": query.fields,
        }
        if query.sorts:
            body["sorts"] = query.sorts
        if query.total:
            body["total"] = True
        if query.dynamic_fields:
            # The API takes dynamic fields as a JSON-encoded string.
            body["dynamic_fields"] = json.dumps(
                [f.model_dump(exclude_none=True) for f in query.dynamic_fields]
            )
        return body

    async def _get_token(self) -> str:
        if self._access_token and not self._token_expired():
            return self._access_token
        async with self._login_lock:
            if self._access_token and not self._token_expired():
                return self._access_token
            await self._login()
        return self._access_token  # type: ignore[return-value]

    async def _refresh_token(self, rejected: str) -> str:
        async with self._login_lock:
            # Another caller may already have replaced the rejected token.
            if self._access_token == rejected:
                await self._login()
        return self._access_token  # type: ignore[return-value]

    def _has_credentials(self) -> bool:
        return bool(self.client_id and self.client_secret)

    def _token_expired(self) -> bool:
        if self._token_expires_at is None:
            return False
        return time.monotonic() >= self._token_expires_at

    async def _login(self) -> None:
        if not self._has_credentials():
            raise QueryExecutionError(
                "Looker access token expired and no client credentials are set"
            )
        logger.info("Logging in to Looker API at %s", self.api_url)
        try:
            response = await self._client.post(
                f"{self.api_url}/login",
                data={
                    "client_id": self.client_id,
                    "client_secret": self.client_secret,
                },
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise QueryExecutionError(
                f"Looker login failed with status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise QueryExecutionError(f"Looker login request failed: {exc}") from exc
        except ValueError as exc:
            raise InvalidQueryResponseError("Looker login returned a non-JSON body") from exc

        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not token:
            raise InvalidQueryResponseError("Looker login response has no access_token")
        self._access_token = token
        expires_in = payload.get("expires_in")
        # Refresh a minute before the server-side expiry.
        self._token_expires_at = (
            time.monotonic() + max(float(expires_in) - 60, 0)
            if expires_in
            else None
        )
