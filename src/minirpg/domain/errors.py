"""Domain-level exceptions."""


class RunCompleteError(Exception):
    """Raised when fighting is requested after the boss encounter resolved."""
