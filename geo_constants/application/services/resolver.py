from collections.abc import Callable

from geo_constants.application.services.base import BaseConfigReader
from geo_constants.domain.constants import ENV_DEFAULT_TIMEZONE, ENV_LEGACY_TIMEZONE
from geo_constants.logging_config import get_logger

logger = get_logger(__name__)


class ScalarDefaultResolver:
    """Resolves single string constants from overrides with a fallback."""

    def __init__(self, reader: BaseConfigReader):
        self.reader = reader

    def lookup(self, key: str) -> str | None:
        """Returns the override for key, or None when it is absent or blank."""
        value = self.reader.get_string(key, "").strip()
        return value or None

    def resolve(self, key: str, fallback: str) -> str:
        value = self.lookup(key)
        if value is None:
            logger.debug(f"No override for {key}, using {fallback!r}")
            return fallback
        logger.debug(f"Override for {key}: {value!r}")
        return value

    def resolve_timezone(self, guess: Callable[[], str]) -> str:
        """
        Resolve the default timezone.

        Precedence: legacy TZ, then DEFAULT_TIMEZONE, then guess(). The guess
        is only evaluated when neither key is set.
        """
        for key in (ENV_LEGACY_TIMEZONE, ENV_DEFAULT_TIMEZONE):
            value = self.lookup(key)
            if value is not None:
                logger.debug(f"Default timezone from {key}: {value!r}")
                return value

        guessed = guess()
        logger.debug(f"No timezone override, guessed {guessed!r}")
        return guessed
