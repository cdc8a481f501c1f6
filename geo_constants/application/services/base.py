from abc import ABC, abstractmethod
from collections.abc import Sequence

from geo_constants.domain.models.reference import ReferenceData


class BaseConfigReader(ABC):
    """
    Abstract base class that defines the interface for reading overrides.

    Any configuration backend can implement it: environment variables,
    file based config or in-memory test doubles.
    """

    @abstractmethod
    def get_string(self, key: str, default: str = "") -> str:
        """
        Read a single string override.

        :param key: The configuration key.
        :param default: Returned when the key is absent.
        :return: The raw override value or the default.
        """
        pass

    @abstractmethod
    def get_strings(self, key: str, default: Sequence[str] = ()) -> list[str]:
        """
        Read a comma-delimited list override.

        :param key: The configuration key.
        :param default: Returned when the key is absent or empty.
        :return: The parsed entries, stripped, without empty entries.
        :raises InvalidOverrideError: If the value cannot be parsed as a list.
        """
        pass


class BaseReferenceDataset(ABC):
    """
    Abstract base class for the static continent, country and timezone data.
    """

    @abstractmethod
    def load(self) -> ReferenceData:
        """
        Load the reference tables.

        :raises ReferenceDataUnavailableError: If any table cannot be loaded.
        """
        pass

    @abstractmethod
    def guess_timezone(self) -> str:
        """
        Guess the host timezone name, used when no override is configured.
        """
        pass
