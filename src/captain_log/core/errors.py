# src/captain_log/core/errors.py

"""
Error taxonomy shared by the parser, the task list and the storage codec.

Every error carries:
- a short machine-readable `reason` (e.g. "duplicate index", "bad done flag"),
- a user-facing message (str(err)),
- an optional `detail` (e.g. the offending save-file line).

All three kinds are recoverable; the orchestrator is the only place that
turns them into replies.
"""

from __future__ import annotations


class CaptainLogError(Exception):
    """Base class for all user-visible failures."""

    def __init__(self, message: str, *, reason: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.reason = reason
        self.detail = detail

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"{type(self).__name__}(reason={self.reason!r}, message={str(self)!r})"


class InputError(CaptainLogError):
    """Malformed command text: bad grammar, missing flag, bad number or date."""


class ValidationError(CaptainLogError):
    """Well-formed request that is invalid for the current state."""


class PersistenceError(CaptainLogError):
    """I/O failure or corrupted on-disk data."""
