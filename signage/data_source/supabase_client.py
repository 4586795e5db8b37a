"""Supabase roster client wrapping the PostgREST HTTP API.

The display only needs one read:

* ``GET /rest/v1/team_members?user_id=eq.<org>&order=birthday_month.asc,birthday_day.asc``
  returns the organization's roster ordered by month then day.

The anon key is sent both as ``apikey`` and as a bearer token, which is what
PostgREST expects for anonymous access; row-level security on the backend
decides which rows are visible. Ordering is a convenience only, the rotation
engine re-filters the roster itself.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Optional, Sequence

import httpx

from signage.config.models import SecretsConfig, SupabaseConfig
from signage.core.errors import DataSourceError

from .models import DisplaySnapshot, parse_team_members_response

LOGGER = logging.getLogger(__name__)

REST_PREFIX = "/rest/v1"
ROSTER_ORDER = "birthday_month.asc,birthday_day.asc"


class SupabaseRosterSource:
    """Synchronous roster reader for a Supabase project.

    Parameters
    ----------
    config:
        :class:`signage.config.models.SupabaseConfig` with the project URL,
        table name, timeout and retry budget.
    secrets:
        :class:`signage.config.models.SecretsConfig` providing the anon key.
    session:
        Optional pre-configured :class:`httpx.Client` (e.g. for tests).

    Notes
    -----
    Retries use exponential backoff ``backoff_base * 2 ** attempt``. Transient
    HTTP/network issues are logged as warnings; after the final attempt the
    last error is wrapped in :class:`DataSourceError`.
    """

    def __init__(
        self,
        config: SupabaseConfig,
        secrets: SecretsConfig,
        session: httpx.Client | None = None,
        *,
        backoff_base: float = 0.25,
    ) -> None:
        self._table = config.table
        self._anon_key = secrets.supabase.anon_key
        self._client = session or httpx.Client(base_url=config.url, timeout=config.timeout_sec)
        self._max_retries = config.max_retries
        self._backoff_base = backoff_base

    def close(self) -> None:
        """Close the underlying HTTP client."""

        self._client.close()

    def _headers(self) -> Dict[str, str]:
        return {
            "apikey": self._anon_key,
            "Authorization": f"Bearer {self._anon_key}",
            "Accept": "application/json",
        }

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Perform an HTTP request with retry/backoff and return the JSON body."""

        url_path = f"{REST_PREFIX}/{path.lstrip('/')}"
        attempt = 0
        last_error: Exception | None = None
        while attempt < self._max_retries:
            try:
                response = self._client.request(
                    method,
                    url_path,
                    params=dict(params or {}),
                    headers=self._headers(),
                )
                response.raise_for_status()
                return response.json()
            except (httpx.HTTPError, ValueError) as exc:
                last_error = exc
                LOGGER.warning(
                    "Supabase %s %s failed (attempt %s/%s): %s",
                    method,
                    url_path,
                    attempt + 1,
                    self._max_retries,
                    exc,
                )
                attempt += 1
                if attempt < self._max_retries:
                    time.sleep(self._backoff_base * (2 ** (attempt - 1)))
        raise DataSourceError(f"Supabase request {method} {url_path} failed: {last_error}") from last_error

    def fetch_roster(self, organization_id: str) -> DisplaySnapshot:
        """Return the roster of ``organization_id`` as a :class:`DisplaySnapshot`."""

        params = {
            "select": "*",
            "user_id": f"eq.{organization_id}",
            "order": ROSTER_ORDER,
        }
        payload = self._request("GET", self._table, params=params)
        if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
            raise DataSourceError(f"Unexpected roster payload type: {type(payload).__name__}")
        snapshot = parse_team_members_response(organization_id, payload)
        LOGGER.info(
            "Roster loaded",
            extra={"organization_id": organization_id, "n_entries": len(snapshot)},
        )
        return snapshot


__all__ = ["SupabaseRosterSource", "ROSTER_ORDER"]
