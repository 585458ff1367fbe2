"""Custom exceptions for the clockzones package."""

from __future__ import annotations


class ClockZonesError(Exception):
    """Base exception for all clockzones errors."""


class CatalogError(ClockZonesError):
    """Raised when the bundled timezone dataset cannot be decoded."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid timezone catalog: {detail}")


class StoreError(ClockZonesError):
    """Raised when a store operation fails."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        msg = f"Store error during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class StoreInitError(ClockZonesError):
    """Raised when a store cannot be opened.  There is nothing to fall back to."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        super().__init__(f"Failed to open store at '{path}': {detail}")
