"""Root-level pytest configuration."""

import pytest

TEMPLATE_FILES = {
    "1.txt": "hello there",
    "2.sql": "SELECT 1;",
    "3.txt": "general kenobi",
}


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers",
        "system: marks tests that drive the command line end to end"
    )


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--slow",
        action="store_true",
        default=False,
        help="run slow tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection based on command line options."""
    if config.getoption("--slow"):
        # --slow given in cli: do not skip slow tests
        return

    skip_slow = pytest.mark.skip(reason="need --slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def template_dir(tmp_path):
    """Directory holding the three reference template files."""
    directory = tmp_path / "template"
    directory.mkdir()
    for name, content in TEMPLATE_FILES.items():
        (directory / name).write_text(content, encoding="utf-8")
    return directory
