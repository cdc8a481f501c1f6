from collections.abc import Sequence

from environs import Env, EnvError

from geo_constants.application.services.base import BaseConfigReader
from geo_constants.domain.exceptions import InvalidOverrideError
from geo_constants.logging_config import get_logger

logger = get_logger(__name__)


class EnvConfigReader(BaseConfigReader):
    """Reads overrides from environment variables through environs."""

    def __init__(self, env: Env | None = None, delimiter: str = ","):
        self.env = env if env is not None else Env()
        self.delimiter = delimiter

    def get_string(self, key: str, default: str = "") -> str:
        return self.env.str(key, default)

    def get_strings(self, key: str, default: Sequence[str] = ()) -> list[str]:
        try:
            values = self.env.list(
                key, list(default), subcast=str, delimiter=self.delimiter
            )
        except EnvError as e:
            raise InvalidOverrideError(key, self.env.str(key, ""), str(e)) from e

        entries = [value.strip() for value in values if value and value.strip()]
        if not entries:
            logger.debug(f"No entries for {key}, using default list")
            return list(default)
        return entries
