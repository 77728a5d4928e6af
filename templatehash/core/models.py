"""Data models for per-file digests and their collections."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass

# Lowercase hex digest string identifying a file or directory tree.
Fingerprint = str


@dataclass(frozen=True)
class FileDigest:
    """Digest of one regular file, keyed by its path below the traversal root."""

    relative_path: tuple[str, ...]
    digest: bytes

    @property
    def posix_path(self) -> str:
        return "/".join(self.relative_path)

    @property
    def hexdigest(self) -> str:
        return self.digest.hex()


def _sort_key(relative_path: tuple[str, ...]) -> bytes:
    return os.fsencode("/".join(relative_path))


class DigestSet:
    """Per-file digests gathered during one tree traversal.

    Insertion order carries no meaning. Anything that reduces the set must go
    through ``sorted_digests``, which orders entries byte-wise on the encoded
    relative path.
    """

    def __init__(self) -> None:
        self._digests: dict[tuple[str, ...], bytes] = {}

    def add(self, file_digest: FileDigest) -> None:
        """Record one file digest; a relative path may only be added once."""
        if file_digest.relative_path in self._digests:
            raise ValueError(f"Duplicate relative path in digest set: {file_digest.posix_path}")
        self._digests[file_digest.relative_path] = file_digest.digest

    def get(self, relative_path: tuple[str, ...]) -> bytes | None:
        return self._digests.get(tuple(relative_path))

    def __len__(self) -> int:
        return len(self._digests)

    def __contains__(self, relative_path: object) -> bool:
        return relative_path in self._digests

    def __iter__(self) -> Iterator[tuple[str, ...]]:
        return iter(self._digests)

    def sorted_digests(self) -> list[FileDigest]:
        """Return all entries ordered by their encoded relative path."""
        return [
            FileDigest(relative_path=relative_path, digest=self._digests[relative_path])
            for relative_path in sorted(self._digests, key=_sort_key)
        ]

    def to_dict(self) -> dict[str, str]:
        """Convert to a JSON-serializable ``{posix_path: hexdigest}`` mapping."""
        return {entry.posix_path: entry.hexdigest for entry in self.sorted_digests()}
