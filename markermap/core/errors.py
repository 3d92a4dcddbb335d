"""Error types raised by the storage layer."""


class MarkerMapError(Exception):
    """Base class for application errors."""


class InitializationError(MarkerMapError):
    """The database could not be opened or its tables could not be created.

    Fatal for the whole application; there is no retry.
    """


class StorageError(MarkerMapError):
    """A single data access operation failed.

    Non-fatal: the view that issued the operation reports it and keeps its
    last good state.
    """

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        message = f"{operation} failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ReferentialIntegrityError(StorageError):
    """A write referenced a marker that does not exist."""
