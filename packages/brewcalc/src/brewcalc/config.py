"""
Configuration management for brewcalc.
"""

import logging
import os
from dataclasses import dataclass

from brewcalc.exceptions import ConfigurationError, ValidationError
from brewcalc.ibu import DEFAULT_METHOD, IbuMethod, parse_method

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class BrewCalcConfig:
    """Configuration for brewcalc."""

    ibu_method: IbuMethod = DEFAULT_METHOD
    log_level: str = "WARNING"

    @property
    def numeric_log_level(self) -> int:
        """Get the log level as a logging module constant."""
        return getattr(logging, self.log_level)


def get_config() -> BrewCalcConfig:
    """
    Get brewcalc configuration from environment.

    Environment variables:
        BREWCALC_IBU_METHOD: Default IBU method (tinseth, rager, garetz, noonan)
        BREWCALC_LOG_LEVEL: Log level name (default WARNING)

    Returns:
        BrewCalcConfig instance

    Raises:
        ConfigurationError: If a variable holds an invalid value
    """
    method_name = os.environ.get("BREWCALC_IBU_METHOD")
    log_level = os.environ.get("BREWCALC_LOG_LEVEL", "WARNING").upper()

    try:
        ibu_method = parse_method(method_name or None)
    except ValidationError as e:
        raise ConfigurationError(f"BREWCALC_IBU_METHOD is invalid: {e}") from e

    if log_level not in LOG_LEVELS:
        raise ConfigurationError(
            f"BREWCALC_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
            f"got: {log_level}"
        )

    return BrewCalcConfig(ibu_method=ibu_method, log_level=log_level)
