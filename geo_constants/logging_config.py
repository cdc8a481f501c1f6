import logging
import sys
from environs import Env
from .log_filters import TruncatingFilter

PACKAGE_LOGGER = "geo_constants"


def setup_logging(env: Env) -> None:
    """Set up logging configuration for applications consuming the constants."""
    if logging.root.handlers:  # Check if logging is already configured
        return

    log_level_str = env.str("LOGGING_LEVEL", "INFO").upper()

    # DEBUG flag overrides log level when set to True
    debug_mode = env.bool("DEBUG", default=False)
    if debug_mode:
        log_level_str = "DEBUG"

    numeric_level = getattr(logging, log_level_str, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level_str}")

    logging.basicConfig(
        level=numeric_level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        stream=sys.stdout,
    )

    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)

    # Overrides such as TIMEZONES can be very long. Logger filters do not see
    # records of child loggers, so the filter goes on the handlers.
    for handler in logging.root.handlers:
        handler.addFilter(TruncatingFilter(PACKAGE_LOGGER, max_length=200))


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
