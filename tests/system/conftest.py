"""Shared fixtures for system-level tests."""

import pytest

MIGRATION_FILES = {
    "1.txt": "hello there",
    "2.sql": "SELECT 1;",
    "3.txt": "general kenobi",
}


@pytest.fixture
def temp_workspace(tmp_path, monkeypatch):
    """Create temporary workspace with a template definition to fingerprint.

    Runs with the workspace as working directory and an empty HOME so no
    configuration file from the developer machine is picked up.
    """
    workspace = tmp_path / "templatehash_test"
    workspace.mkdir()
    (workspace / "home").mkdir()

    migrations = workspace / "migrations"
    migrations.mkdir()
    for name, content in MIGRATION_FILES.items():
        (migrations / name).write_text(content, encoding="utf-8")

    monkeypatch.chdir(workspace)
    monkeypatch.setenv("HOME", str(workspace / "home"))
    for key in ("TEMPLATEHASH_MAX_WORKERS", "TEMPLATEHASH_ALGORITHM", "TEMPLATEHASH_DEBUG"):
        monkeypatch.delenv(key, raising=False)

    return {
        "root": workspace,
        "migrations": migrations,
        "seed": migrations / "2.sql",
    }
