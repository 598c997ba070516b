"""Client for the spreadsheet-backed sync endpoint.

The endpoint is a single URL that takes JSON POSTs: ``{"action": "list"}``,
``{"action": "delete", "id": ...}``, or a bare entry row to upsert.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..core.exceptions import SyncError
from ..entries.model import AttendanceEntry

_logger = logging.getLogger(__name__)


class SheetSyncClient:
    def __init__(self, url: str, *, timeout: float = 15.0):
        self._url = url
        self._timeout = timeout

    def _post(self, payload: dict) -> dict:
        try:
            response = requests.post(
                self._url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            _logger.error("Sheet request failed: %s", e)
            raise SyncError(f"Sheet request failed: {e}") from e

        try:
            data: Any = response.json()
        except ValueError as e:
            raise SyncError("API returned non-JSON response: " + response.text[:120]) from e
        if not isinstance(data, dict):
            raise SyncError("API returned unexpected response")
        return data

    def list_entries(self) -> list[dict]:
        return list(self._post({"action": "list"}).get("rows") or [])

    def upsert_entry(self, entry: AttendanceEntry) -> Optional[str]:
        """Send the entry row; returns the sheet's id for it."""
        data = self._post(entry.to_sheet_payload())
        if not data.get("ok"):
            raise SyncError(data.get("error") or "Save failed")
        sheet_id = data.get("id") or entry.sheet_id
        _logger.debug("Synced entry worker=%s date=%s as %s", entry.worker_id, entry.work_date, sheet_id)
        return str(sheet_id) if sheet_id is not None else None

    def delete_entry(self, sheet_id: str) -> None:
        data = self._post({"action": "delete", "id": sheet_id})
        if not data.get("ok"):
            raise SyncError(data.get("error") or "Delete failed")
