"""Core components of templatehash.

This module contains the data models and the exception taxonomy shared by the
fingerprinting engine and the command line.
"""

from templatehash.core.errors import (
    ConcurrentTaskFailure,
    FileReadError,
    FingerprintError,
    InvalidArgumentError,
    InvalidPathKindError,
    NotADirectoryPathError,
    NotARegularFileError,
    PathNotFoundError,
)
from templatehash.core.models import DigestSet, FileDigest, Fingerprint

__all__ = [
    "ConcurrentTaskFailure",
    "DigestSet",
    "FileDigest",
    "FileReadError",
    "Fingerprint",
    "FingerprintError",
    "InvalidArgumentError",
    "InvalidPathKindError",
    "NotADirectoryPathError",
    "NotARegularFileError",
    "PathNotFoundError",
]
