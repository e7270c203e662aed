"""Ingestion failures. Each carries the message shown to the user.

None of these is fatal: the store keeps its previous goal list.
"""

from __future__ import annotations


class TrackerError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigMissing(TrackerError):
    """Sheet id or API key not configured; no request is attempted."""

    status_code = 503


class TransportTimeout(TrackerError):
    status_code = 504


class TransportError(TrackerError):
    """Connection failure, non-2xx response or malformed body."""

    status_code = 502


class EmptyResult(TrackerError):
    status_code = 422


class ParseFailure(TrackerError):
    status_code = 422


class SyncInProgress(TrackerError):
    status_code = 409
