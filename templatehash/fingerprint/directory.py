"""Directory fingerprints built from per-file digests."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from templatehash.core.errors import NotADirectoryPathError, PathNotFoundError
from templatehash.core.models import DigestSet, Fingerprint
from templatehash.fingerprint.hashing import DEFAULT_ALGORITHM, new_hash, stat_mode
from templatehash.fingerprint.scheduler import hash_tree

LOGGER = logging.getLogger("templatehash.fingerprint.directory")


def require_directory(dir_path: str | os.PathLike) -> Path:
    """Return dir_path as a Path, failing unless it is an existing directory."""
    path = Path(dir_path)
    try:
        mode = stat_mode(path)
    except PathNotFoundError:
        raise NotADirectoryPathError(f"Directory does not exist: {path}", path) from None
    if not stat.S_ISDIR(mode):
        raise NotADirectoryPathError(f"Path is not a directory: {path}", path)
    return path


def digest_set_fingerprint(digests: DigestSet, *, algorithm: str = DEFAULT_ALGORITHM) -> Fingerprint:
    """Reduce a digest set to one fingerprint.

    The hex text of each file digest, not its raw bytes, is fed into the
    accumulator in sorted relative path order. An empty set yields the digest
    of zero bytes.
    """
    accumulator = new_hash(algorithm)
    for entry in digests.sorted_digests():
        accumulator.update(entry.hexdigest.encode("ascii"))
    return accumulator.hexdigest()


def hash_directory(
    dir_path: str | os.PathLike,
    *,
    max_workers: int | None = None,
    algorithm: str = DEFAULT_ALGORITHM,
) -> Fingerprint:
    """Return the fingerprint of every regular file below a directory."""
    path = require_directory(dir_path)

    digests = hash_tree(path, max_workers=max_workers, algorithm=algorithm)
    fingerprint = digest_set_fingerprint(digests, algorithm=algorithm)
    LOGGER.debug(f"Directory {path}: {len(digests)} files -> {fingerprint}")
    return fingerprint
