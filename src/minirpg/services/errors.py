"""Service-layer exceptions."""

from minirpg.domain.errors import RunCompleteError


class FactoryError(Exception):
    """Raised when a runtime entity cannot be created."""


class HistoryStoreError(Exception):
    """Raised when the ranked history file cannot be read or written."""


__all__ = ["FactoryError", "HistoryStoreError", "RunCompleteError"]
