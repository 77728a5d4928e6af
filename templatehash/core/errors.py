"""Exceptions raised by the fingerprinting engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class FingerprintError(Exception):
    """Base class for every fingerprinting failure."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class PathNotFoundError(FingerprintError):
    """Raised when a path does not exist."""


class NotARegularFileError(FingerprintError):
    """Raised when a file operation is given a directory or special file."""


class NotADirectoryPathError(FingerprintError):
    """Raised when a directory operation is given anything but a directory."""


class InvalidPathKindError(FingerprintError):
    """Raised when a path exists but is neither a file nor a directory."""


class FileReadError(FingerprintError):
    """Raised when an existing file or directory cannot be read."""


class InvalidArgumentError(FingerprintError):
    """Raised when an operation is called with unusable arguments."""


class ConcurrentTaskFailure(FingerprintError):
    """Raised when one or more parallel hashing tasks failed.

    Only the first failure observed while draining the pool is kept in
    ``cause``; it is also chained as ``__cause__``.
    """

    def __init__(self, message: str, path: Path | None = None, cause: Exception | None = None):
        super().__init__(message, path)
        self.cause = cause
