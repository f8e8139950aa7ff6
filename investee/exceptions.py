"""Custom exception hierarchy for investee."""


class InvesteeError(Exception):
    """Base exception for all investee errors."""


class PropertyNotFoundError(InvesteeError):
    """Raised when a referenced property does not exist."""


class InvalidInputError(InvesteeError, ValueError):
    """Raised when a calculator receives inputs outside its domain."""


class DegenerateResultError(InvesteeError):
    """Raised when a ratio cannot be computed because its denominator is zero."""


class ConfigurationError(InvesteeError):
    """Raised when configuration is invalid or missing."""
