"""Custom exceptions for data loading and validation."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when a definition file is missing or is not valid JSON."""


class DataValidationError(DataError):
    """Raised when definition content has the wrong shape or values."""


class DataReferenceError(DataError):
    """Raised when a roster names an enemy that is not defined."""
