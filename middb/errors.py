"""Exception hierarchy for the storage engine."""

from __future__ import annotations


class MidDBError(Exception):
    """Base class for every error raised by the engine."""

    prefix = "Database error"

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.message:
            return f"{self.prefix}: {self.message}"
        return self.prefix


class StorageIOError(MidDBError):
    """An operating-system level I/O failure."""

    prefix = "I/O error"

    def __init__(self, error: BaseException | str) -> None:
        self.error = error
        super().__init__(str(error))
        if isinstance(error, BaseException):
            self.__cause__ = error


class SerializationError(MidDBError):
    """Data could not be encoded or decoded."""

    prefix = "Serialization error"


class KeyNotFoundError(MidDBError):
    """A requested key does not exist."""

    prefix = "Key not found"


class TransactionConflictError(MidDBError):
    """A transaction could not be committed because of a conflict."""

    prefix = "Transaction conflict"


class StorageFullError(MidDBError):
    """No more space is available for storage."""

    prefix = "Storage full"


class CorruptionError(MidDBError):
    """Stored data failed an integrity check."""

    prefix = "Data corruption"


class InvalidConfigError(MidDBError):
    """A configuration value is out of its allowed range."""

    prefix = "Invalid configuration"


class InvalidArgumentError(MidDBError):
    """A caller passed an unusable argument."""

    prefix = "Invalid argument"


class InternalError(MidDBError):
    """An unexpected internal failure."""

    prefix = "Internal error"