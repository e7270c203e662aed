"""Google Sheets connector — async read of one values range via the v4 REST API.

  GET {base}/v4/spreadsheets/{sheet_id}/values/{range}?key={api_key}
  200 -> {"range": "...", "majorDimension": "ROWS", "values": [[...], ...]}
  4xx/5xx -> {"error": {"code": 403, "message": "...", "status": "..."}}

`values` is omitted entirely when the range is empty. No retries: each
failure surfaces once as a TrackerError.
"""

from __future__ import annotations

import logging
import re
from typing import Any
from urllib.parse import quote

import httpx

from app.tracker.errors import ConfigMissing, TransportError, TransportTimeout

logger = logging.getLogger(__name__)

_SHEET_URL_MARKER = "docs.google.com/spreadsheets/d/"
_SHEET_ID_IN_URL = re.compile(r"/d/([a-zA-Z0-9-_]+)")


def extract_sheet_id(value: str | None) -> str:
    """Accept a bare sheet id or the full docs.google.com URL."""
    if not value:
        return ""
    value = value.strip()
    if _SHEET_URL_MARKER in value:
        m = _SHEET_ID_IN_URL.search(value)
        if m:
            return m.group(1)
    return value


def build_values_url(base_url: str, sheet_id: str, cell_range: str) -> str:
    return f"{base_url.rstrip('/')}/v4/spreadsheets/{sheet_id}/values/{quote(cell_range, safe='!:')}"


def _error_message(response: httpx.Response) -> str:
    """Human-readable message from a Sheets error payload."""
    fallback = f"HTTP error! status: {response.status_code}"
    try:
        payload = response.json()
    except ValueError:
        return fallback
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return fallback


async def fetch_sheet_rows(
    sheet_id: str | None,
    api_key: str | None,
    cell_range: str,
    *,
    base_url: str = "https://sheets.googleapis.com",
    timeout: float = 15.0,
    client: httpx.AsyncClient | None = None,
) -> list[list[Any]]:
    """Fetch the rows of `cell_range`. Returns [] when the range is empty.

    Raises ConfigMissing before any request when id or key is absent,
    TransportTimeout past `timeout` seconds, TransportError otherwise.
    """
    sheet_id = extract_sheet_id(sheet_id)
    if not sheet_id or not api_key:
        raise ConfigMissing(
            "Google Sheets configuration missing. Please set GOOGLE_SHEET_ID and GOOGLE_API_KEY in your environment."
        )

    url = build_values_url(base_url, sheet_id, cell_range)
    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=timeout)

    try:
        response = await client.get(url, params={"key": api_key}, timeout=timeout)
    except httpx.TimeoutException as exc:
        logger.warning("Sheets fetch timed out after %.0fs", timeout)
        raise TransportTimeout(
            f"Sync timed out after {timeout:.0f} seconds. Please check your internet connection "
            "and ensure the Sheet ID is correct."
        ) from exc
    except httpx.HTTPError as exc:
        logger.warning("Sheets fetch failed: %s", exc)
        raise TransportError(f"Sync failed: {exc}") from exc
    finally:
        if owns_client:
            await client.aclose()

    if not response.is_success:
        message = _error_message(response)
        logger.warning("Sheets responded %d: %s", response.status_code, message)
        raise TransportError(f"Sync failed: {message}")

    try:
        payload = response.json()
    except ValueError as exc:
        raise TransportError("Sync failed: response was not valid JSON") from exc
    if not isinstance(payload, dict):
        raise TransportError("Sync failed: unexpected response shape")

    rows = payload.get("values") or []
    if not isinstance(rows, list):
        raise TransportError("Sync failed: unexpected response shape")
    logger.debug("Fetched %d rows from %s", len(rows), cell_range)
    return rows
