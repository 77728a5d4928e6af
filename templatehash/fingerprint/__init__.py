"""Content fingerprints for files, directory trees and template definitions."""

from templatehash.fingerprint.config import FingerprintConfig
from templatehash.fingerprint.directory import digest_set_fingerprint, hash_directory
from templatehash.fingerprint.hashing import DEFAULT_ALGORITHM, file_fingerprint, hash_file
from templatehash.fingerprint.scheduler import hash_tree
from templatehash.fingerprint.template import hash_paths, path_fingerprint

__all__ = [
    "DEFAULT_ALGORITHM",
    "FingerprintConfig",
    "digest_set_fingerprint",
    "file_fingerprint",
    "hash_directory",
    "hash_file",
    "hash_paths",
    "hash_tree",
    "path_fingerprint",
]
