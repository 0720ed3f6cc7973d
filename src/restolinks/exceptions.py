"""Exceptions for restolinks."""


class RestolinksError(Exception):
    """Base exception for all restolinks errors."""
    pass


class ConfigurationError(RestolinksError):
    """Raised when settings are missing or invalid."""
    pass
