"""Parallel per-file hashing of a directory tree."""

from __future__ import annotations

import logging
import os
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import TYPE_CHECKING

from templatehash.core.errors import ConcurrentTaskFailure, FileReadError, InvalidArgumentError
from templatehash.core.models import DigestSet, FileDigest
from templatehash.fingerprint.hashing import DEFAULT_ALGORITHM, hash_file, validate_algorithm

if TYPE_CHECKING:
    from collections.abc import Iterator

LOGGER = logging.getLogger("templatehash.fingerprint.scheduler")


def default_worker_count() -> int:
    """Pool size matching the available hardware parallelism."""
    return max(1, os.cpu_count() or 1)


def resolve_worker_count(max_workers: int | None) -> int:
    if max_workers is None:
        return default_worker_count()
    if max_workers < 1:
        raise InvalidArgumentError(f"max_workers must be at least 1, got {max_workers}")
    return max_workers


def _raise_walk_error(error: OSError) -> None:
    raise error


def iter_regular_files(root: Path) -> Iterator[Path]:
    """Yield every regular file below root, without entering symlinked directories."""
    for directory, _dirs, files in os.walk(root, onerror=_raise_walk_error):
        directory_path = Path(directory)
        for filename in files:
            candidate = directory_path / filename
            if candidate.is_file():
                yield candidate


def _hash_task(root: Path, path: Path, algorithm: str) -> FileDigest:
    return FileDigest(
        relative_path=path.relative_to(root).parts,
        digest=hash_file(path, algorithm=algorithm),
    )


def hash_tree(
    root_dir: str | os.PathLike,
    *,
    max_workers: int | None = None,
    algorithm: str = DEFAULT_ALGORITHM,
) -> DigestSet:
    """Hash every regular file below root_dir on a bounded thread pool.

    All submitted tasks run to completion even when a sibling fails. If any
    task failed, the first failure seen while draining completions is raised
    as ``ConcurrentTaskFailure`` and no digests are returned.

    Args:
        root_dir: Directory to traverse recursively
        max_workers: Pool size, defaults to the CPU count
        algorithm: hashlib algorithm name

    Returns:
        DigestSet keyed by path relative to root_dir
    """
    root = Path(root_dir)
    workers = resolve_worker_count(max_workers)
    validate_algorithm(algorithm)

    futures: dict[Future[FileDigest], Path] = {}
    digests = DigestSet()
    first_error: Exception | None = None
    first_error_path: Path | None = None
    failed = 0

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="templatehash") as executor:
        try:
            for path in iter_regular_files(root):
                futures[executor.submit(_hash_task, root, path, algorithm)] = path
        except OSError as error:
            # Leaving the pool context still waits for tasks already submitted.
            failed_path = Path(error.filename) if error.filename else root
            LOGGER.warning(f"Error traversing {failed_path}: {error}")
            raise FileReadError(f"Cannot traverse {failed_path}: {error}", failed_path) from error

        LOGGER.debug(f"Scheduled {len(futures)} hashing tasks on {workers} workers under {root}")

        for future in as_completed(futures):
            error = future.exception()
            if error is None:
                digests.add(future.result())
                continue

            failed += 1
            LOGGER.warning(f"Error processing file {futures[future]}: {error}")
            if first_error is None:
                first_error = error
                first_error_path = futures[future]

    if first_error is not None:
        raise ConcurrentTaskFailure(
            f"{failed} of {len(futures)} hashing tasks failed under {root}: {first_error}",
            first_error_path,
            cause=first_error,
        ) from first_error

    LOGGER.debug(f"Hashed {len(digests)} files under {root}")
    return digests
