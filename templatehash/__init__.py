"""templatehash.

Deterministic content fingerprints for files and directory trees, used as
cache keys identifying test database template definitions.
"""

__version__ = "0.1.0"

# Public API exports
from templatehash.core.errors import FingerprintError
from templatehash.core.models import DigestSet, FileDigest
from templatehash.fingerprint import (
    FingerprintConfig,
    file_fingerprint,
    hash_directory,
    hash_file,
    hash_paths,
    hash_tree,
)

__all__ = [
    "DigestSet",
    "FileDigest",
    "FingerprintConfig",
    "FingerprintError",
    "file_fingerprint",
    "hash_directory",
    "hash_file",
    "hash_paths",
    "hash_tree",
]
