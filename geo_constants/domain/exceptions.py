class ConstantsException(Exception):
    """
    Base exception for all constant derivation errors.
    """


class ReferenceDataUnavailableError(ConstantsException):
    """
    Raised when a reference dataset table cannot be loaded or is empty.
    Fatal - no derived constant can be trusted without it.
    """


class InvalidOverrideError(ConstantsException, ValueError):
    """
    Raised by config readers when an override value cannot be parsed.
    The list builder degrades to the raw value instead of failing.
    """

    def __init__(self, key: str, raw_value: str, reason: str = ""):
        self.key = key
        self.raw_value = raw_value
        message = f"Invalid override for {key}: {raw_value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
