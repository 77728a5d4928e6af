"""Template fingerprints combining several files and directories."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from templatehash.core.errors import InvalidArgumentError, InvalidPathKindError
from templatehash.core.models import Fingerprint
from templatehash.fingerprint.directory import hash_directory
from templatehash.fingerprint.hashing import (
    DEFAULT_ALGORITHM,
    file_fingerprint,
    new_hash,
    stat_mode,
)

LOGGER = logging.getLogger("templatehash.fingerprint.template")


def path_fingerprint(
    path: str | os.PathLike,
    *,
    max_workers: int | None = None,
    algorithm: str = DEFAULT_ALGORITHM,
) -> Fingerprint:
    """Fingerprint a single file or directory."""
    path = Path(path)
    mode = stat_mode(path)
    if stat.S_ISDIR(mode):
        return hash_directory(path, max_workers=max_workers, algorithm=algorithm)
    if stat.S_ISREG(mode):
        return file_fingerprint(path, algorithm=algorithm)
    raise InvalidPathKindError(f"Path is neither a file nor a directory: {path}", path)


def hash_paths(
    *paths: str | os.PathLike,
    max_workers: int | None = None,
    algorithm: str = DEFAULT_ALGORITHM,
) -> Fingerprint:
    """Calculate a template fingerprint from one or more files or directories.

    Each path is fingerprinted on its own and the hex strings are fed into a
    final digest in the order given. The order is not normalized, so
    ``hash_paths(a, b)`` and ``hash_paths(b, a)`` generally differ; callers
    must pass paths in a stable order.

    Args:
        *paths: Files or directories making up the template definition
        max_workers: Pool size used for each directory
        algorithm: hashlib algorithm name

    Returns:
        Lowercase hex fingerprint
    """
    if not paths:
        raise InvalidArgumentError("At least one path must be provided")

    accumulator = new_hash(algorithm)
    for path in paths:
        single = path_fingerprint(path, max_workers=max_workers, algorithm=algorithm)
        LOGGER.debug(f"Template component {path}: {single}")
        accumulator.update(single.encode("ascii"))
    return accumulator.hexdigest()
