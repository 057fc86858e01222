"""
Supabase (PostgREST) client.
Handles authentication headers, delta queries and upserts.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

import httpx
import structlog

from . import dates
from ..config import Settings
from ..errors import AuthenticationFailure, NetworkFailure, RemoteRejected

logger = structlog.get_logger(__name__)

_TRANSIENT_STATUS = {408, 425, 429, 500, 502, 503, 504}


class SupabaseClient:
    """Client for the Supabase REST endpoint of one project."""

    def __init__(
        self,
        settings: Settings,
        access_token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = settings.supabase_key
        self.access_token = access_token or settings.supabase_access_token or settings.supabase_key
        if not settings.supabase_url:
            raise ValueError("SUPABASE_URL is required")
        self.base_url = f"{settings.supabase_url.rstrip('/')}/rest/v1"
        self.page_size = settings.sync_page_size
        self._client = httpx.AsyncClient(timeout=settings.http_timeout_seconds, transport=transport)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()

    def _get_auth_header(self) -> Dict[str, str]:
        if not self.api_key or not self.access_token:
            raise AuthenticationFailure("Supabase API key is required")
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.access_token}",
        }

    async def _request(self, method: str, table: str, **kwargs) -> Any:
        url = f"{self.base_url}/{table.lstrip('/')}"
        headers = self._get_auth_header()
        headers.update(kwargs.pop("headers", {}))

        try:
            response = await self._client.request(method, url, headers=headers, **kwargs)
        except httpx.TimeoutException as e:
            raise NetworkFailure(f"{method} {table} timed out") from e
        except httpx.TransportError as e:
            raise NetworkFailure(f"{method} {table} failed: {e}") from e

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            detail = e.response.text[:500]
            if status in (401, 403):
                raise AuthenticationFailure(f"{method} {table}: {detail}", status_code=status) from e
            if status in _TRANSIENT_STATUS:
                raise NetworkFailure(f"{method} {table}: HTTP {status}", status_code=status) from e
            raise RemoteRejected(f"{method} {table}: {detail}", status_code=status) from e

        if not response.content:
            return None
        return response.json()

    async def fetch_changes(
        self,
        table: str,
        since: Optional[datetime] = None,
        farm_id: Optional[str] = None,
        cursor_columns: Sequence[str] = ("updated_at", "deleted_at"),
    ) -> List[Dict[str, Any]]:
        """Rows changed (or soft-deleted) since ``since``; every row when None.

        A row matches when any of ``cursor_columns`` is at or after ``since``.
        Pages are ordered by the first of them, so callers see rows in
        modification order.
        """
        rows: List[Dict[str, Any]] = []
        offset = 0
        while True:
            params: Dict[str, Any] = {
                "select": "*",
                "order": f"{cursor_columns[0]}.asc",
                "limit": self.page_size,
                "offset": offset,
            }
            if since is not None:
                ts = dates.format(since)
                if len(cursor_columns) == 1:
                    params[cursor_columns[0]] = f"gte.{ts}"
                else:
                    params["or"] = "(" + ",".join(f"{col}.gte.{ts}" for col in cursor_columns) + ")"
            if farm_id:
                params["farm_id"] = f"eq.{farm_id}"
            page = await self._request("GET", table, params=params) or []
            rows.extend(page)
            if len(page) < self.page_size:
                break
            offset += self.page_size
        logger.debug("remote_rows_fetched", table=table, count=len(rows), since=dates.format(since) if since else None)
        return rows

    async def upsert(self, table: str, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Insert or merge one row by primary key; returns the stored row."""
        result = await self._request(
            "POST",
            table,
            json=payload,
            params={"on_conflict": "id"},
            headers={"Prefer": "resolution=merge-duplicates,return=representation"},
        )
        if isinstance(result, list):
            return result[0] if result else None
        return result
