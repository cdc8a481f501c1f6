from .env_reader import EnvConfigReader

__all__ = ["EnvConfigReader"]
