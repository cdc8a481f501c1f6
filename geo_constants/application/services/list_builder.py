from collections.abc import Sequence

from geo_constants.application.services.base import BaseConfigReader
from geo_constants.domain.exceptions import InvalidOverrideError
from geo_constants.domain.normalizers import sorted_uniq
from geo_constants.logging_config import get_logger

logger = get_logger(__name__)


class OrderedUniqueListBuilder:
    """Builds sorted, duplicate-free lists from a list override or a fallback."""

    def __init__(self, reader: BaseConfigReader):
        self.reader = reader

    def build(self, key: str, fallback: str | Sequence[str]) -> tuple[str, ...]:
        """
        Build the list for key.

        A scalar fallback is treated as a one-element list. An override that
        cannot be parsed is kept as a single literal entry.
        """
        default = [fallback] if isinstance(fallback, str) else list(fallback)

        try:
            values = self.reader.get_strings(key, default)
        except InvalidOverrideError as e:
            logger.warning(f"{e}, keeping it as a single entry")
            values = [e.raw_value.strip()]

        if not values:
            values = default

        result = sorted_uniq(values)
        logger.debug(f"Built {key} with {len(result)} entries")
        return result
