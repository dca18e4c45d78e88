"""Tagged errors raised by the ledger services.

Each error carries the HTTP status the API layer maps it to, so services stay
free of FastAPI imports.
"""

from __future__ import annotations

__all__ = [
    "LedgerError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "StorageError",
]


class LedgerError(Exception):
    """Base class for failures surfaced to API callers."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(LedgerError):
    """A required field is missing or out of range."""

    status_code = 400
    default_message = "Invalid request"


class NotFoundError(LedgerError):
    """A referenced agent or post does not exist."""

    status_code = 404
    default_message = "Not found"


class ConflictError(LedgerError):
    """A uniqueness rule was violated (duplicate tx_hash, name or address)."""

    status_code = 409
    default_message = "Conflict"


class StorageError(LedgerError):
    """The store was unavailable or the transaction was aborted."""

    status_code = 500
    default_message = "Internal server error"
