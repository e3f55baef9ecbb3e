"""
Exception types for brewcalc.

All exceptions inherit from BrewCalcError for easy catching
of any library-related errors.
"""


class BrewCalcError(Exception):
    """Base exception for all brewcalc errors."""

    pass


class ValidationError(BrewCalcError, ValueError):
    """Raised when a quantity or calculation input fails validation."""

    pass


class IbuMethodNotImplementedError(BrewCalcError, NotImplementedError):
    """Raised when an IBU method without a defined formula is invoked."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"IBU method '{method}' is not implemented")


class ConfigurationError(BrewCalcError):
    """Raised when configuration is invalid."""

    pass
