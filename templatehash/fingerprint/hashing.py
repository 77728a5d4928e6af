"""File hashing helpers for template fingerprints."""

from __future__ import annotations

import hashlib
import os
import stat
from hashlib import file_digest
from pathlib import Path

from templatehash.core.errors import (
    FileReadError,
    InvalidArgumentError,
    NotARegularFileError,
    PathNotFoundError,
)
from templatehash.core.models import Fingerprint

DEFAULT_ALGORITHM = "md5"

# SHAKE digests have no fixed length.
SUPPORTED_ALGORITHMS = frozenset(
    name for name in hashlib.algorithms_guaranteed if not name.startswith("shake_")
)


def validate_algorithm(algorithm: str) -> str:
    if algorithm not in SUPPORTED_ALGORITHMS:
        raise InvalidArgumentError(f"Unsupported hash algorithm: {algorithm}")
    return algorithm


def new_hash(algorithm: str = DEFAULT_ALGORITHM):
    """Create an empty hash object; digests here are for change detection only."""
    return hashlib.new(validate_algorithm(algorithm), usedforsecurity=False)


def stat_mode(path: Path) -> int:
    """Return the st_mode of path, following symlinks."""
    try:
        return path.stat().st_mode
    except FileNotFoundError:
        raise PathNotFoundError(f"Path does not exist: {path}", path) from None
    except OSError as error:
        raise FileReadError(f"Cannot stat {path}: {error}", path) from error


def hash_file(path: str | os.PathLike, *, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """Return the raw digest of a regular file's contents."""
    path = Path(path)
    if not stat.S_ISREG(stat_mode(path)):
        raise NotARegularFileError(f"Path is not a regular file: {path}", path)

    digest = new_hash(algorithm)
    try:
        with path.open("rb") as input_file:
            return file_digest(input_file, lambda: digest).digest()
    except FileNotFoundError:
        raise PathNotFoundError(f"File disappeared before it could be read: {path}", path) from None
    except OSError as error:
        raise FileReadError(f"Cannot read {path}: {error}", path) from error


def file_fingerprint(path: str | os.PathLike, *, algorithm: str = DEFAULT_ALGORITHM) -> Fingerprint:
    """Return lowercase hex digest for file contents."""
    return hash_file(path, algorithm=algorithm).hex()
