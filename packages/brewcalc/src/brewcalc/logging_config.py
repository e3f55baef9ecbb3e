import logging
import sys

from brewcalc.config import BrewCalcConfig, get_config


def setup_logging(config: BrewCalcConfig | None = None) -> None:
    """Set up logging for applications using brewcalc."""
    if logging.root.handlers:  # Check if logging is already configured
        return

    if config is None:
        config = get_config()

    logging.basicConfig(
        level=config.numeric_log_level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("brewcalc").setLevel(config.numeric_log_level)
