"""Tests for single-file hashing."""

import hashlib
import os
from pathlib import Path

import pytest

from templatehash.core.errors import (
    FileReadError,
    InvalidArgumentError,
    NotARegularFileError,
    PathNotFoundError,
)
from templatehash.fingerprint.hashing import file_fingerprint, hash_file, new_hash


def test_file_fingerprint_matches_reference_value(template_dir):
    assert file_fingerprint(template_dir / "2.sql") == "71568061b2970a4b7c5160fe75356e10"


def test_hash_file_matches_hashlib(tmp_path):
    path = tmp_path / "schema.sql"
    payload = b"CREATE TABLE users (id serial primary key);"
    path.write_bytes(payload)

    assert hash_file(path) == hashlib.md5(payload).digest()
    assert file_fingerprint(path) == hashlib.md5(payload).hexdigest()


def test_file_fingerprint_is_lowercase_fixed_length(tmp_path):
    path = tmp_path / "seed.sql"
    path.write_bytes(b"\x00\xff" * 1000)

    fingerprint = file_fingerprint(path)

    assert len(fingerprint) == 32
    assert fingerprint == fingerprint.lower()


def test_empty_file_hashes_to_empty_digest(tmp_path):
    path = tmp_path / "empty.sql"
    path.write_bytes(b"")

    assert file_fingerprint(path) == "d41d8cd98f00b204e9800998ecf8427e"


def test_hash_file_differs_for_different_content(tmp_path):
    first_path = tmp_path / "one.sql"
    second_path = tmp_path / "two.sql"
    first_path.write_bytes(b"SELECT 1;")
    second_path.write_bytes(b"SELECT 2;")

    assert hash_file(first_path) != hash_file(second_path)


def test_hash_file_accepts_other_algorithms(tmp_path):
    path = tmp_path / "schema.sql"
    path.write_bytes(b"content")

    assert file_fingerprint(path, algorithm="sha256") == hashlib.sha256(b"content").hexdigest()


def test_hash_file_follows_symlink_to_file(tmp_path):
    target = tmp_path / "target.sql"
    target.write_bytes(b"linked")
    link = tmp_path / "link.sql"
    link.symlink_to(target)

    assert hash_file(link) == hash_file(target)


def test_hash_file_raises_for_missing_file(tmp_path):
    missing = tmp_path / "missing.sql"

    with pytest.raises(PathNotFoundError) as excinfo:
        hash_file(missing)

    assert excinfo.value.path == missing


def test_hash_file_raises_for_directory(tmp_path):
    with pytest.raises(NotARegularFileError):
        hash_file(tmp_path)


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires os.mkfifo")
def test_hash_file_raises_for_fifo(tmp_path):
    fifo = tmp_path / "pipe"
    os.mkfifo(fifo)

    with pytest.raises(NotARegularFileError):
        hash_file(fifo)


def test_hash_file_wraps_read_errors(tmp_path, monkeypatch):
    path = tmp_path / "locked.sql"
    path.write_bytes(b"secret")
    original_open = Path.open

    def failing_open(self, *args, **kwargs):
        if self == path:
            raise PermissionError(13, "Permission denied", str(self))
        return original_open(self, *args, **kwargs)

    monkeypatch.setattr(Path, "open", failing_open)

    with pytest.raises(FileReadError) as excinfo:
        hash_file(path)

    assert excinfo.value.path == path
    assert isinstance(excinfo.value.__cause__, PermissionError)


@pytest.mark.parametrize("algorithm", ["shake_128", "shake_256", "not-a-hash"])
def test_new_hash_rejects_unusable_algorithms(algorithm):
    with pytest.raises(InvalidArgumentError, match="Unsupported hash algorithm"):
        new_hash(algorithm)


def test_hash_file_rejects_unusable_algorithm(tmp_path):
    path = tmp_path / "schema.sql"
    path.write_bytes(b"content")

    with pytest.raises(InvalidArgumentError):
        hash_file(path, algorithm="shake_128")
