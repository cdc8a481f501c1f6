"""Facade adapter for one-call access to the runtime constants."""

from environs import Env

from geo_constants.application.orchestration import ConstantTableBuilder
from geo_constants.application.services.base import (
    BaseConfigReader,
    BaseReferenceDataset,
)
from geo_constants.domain.models.constants import Constants
from geo_constants.infrastructure.config.env_reader import EnvConfigReader
from geo_constants.infrastructure.reference.dataset import PackagedReferenceDataset


class ConstantsProvider:
    """
    Simplified facade for consuming applications.

    Hides the wiring of config reader, reference dataset and builder. The
    constants are built on first access and reused afterwards, so a single
    provider created at startup can be passed to every consumer.
    """

    def __init__(self, reader: BaseConfigReader, dataset: BaseReferenceDataset):
        """
        Initialize facade with required dependencies.

        Args:
            reader: Source of configuration overrides
            dataset: Source of continent, country and timezone tables
        """
        self._builder = ConstantTableBuilder(reader, dataset)
        self._constants: Constants | None = None

    @classmethod
    def create_from_env(cls, env: Env) -> "ConstantsProvider":
        """
        Factory method: one-line initialization from environment.

        Args:
            env: Environment variable handler (Env instance)

        Returns:
            Configured ConstantsProvider ready to use

        Example:
            >>> from environs import Env
            >>> env = Env()
            >>> env.read_env()
            >>> provider = ConstantsProvider.create_from_env(env)
            >>> provider.constants.default_locale
            'en'
        """
        return cls(EnvConfigReader(env), PackagedReferenceDataset())

    @property
    def constants(self) -> Constants:
        """
        Get the constants, building them on first access.

        Raises:
            ReferenceDataUnavailableError: If the reference dataset is missing
        """
        if self._constants is None:
            self._constants = self._builder.build()
        return self._constants


def load_constants(env: Env | None = None) -> Constants:
    """
    Build the constants from the process environment.

    When no Env is given a new one is created and a .env file, if present,
    is read first.
    """
    if env is None:
        env = Env()
        env.read_env()
    return ConstantsProvider.create_from_env(env).constants
