"""Exceptions for the files API."""


class FileStoreError(Exception):
    """Base class for every error raised by the file store."""


class ValidationError(FileStoreError):
    """Raised when a path or listing parameter is malformed.

    Also covers writes that target a directory address instead of a file.
    """


class NotFoundError(FileStoreError):
    """Raised when no live record exists at the requested address."""


class ConflictError(FileStoreError):
    """Raised when a live record already occupies the address being created."""


class StorageError(FileStoreError):
    """Raised when the database itself fails.

    The original SQLAlchemy exception is kept as ``__cause__``.
    """
