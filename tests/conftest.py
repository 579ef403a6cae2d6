import os
from pathlib import Path

import pytest

# Test directory name -> marker. Integration tests also count as slow.
_LAYER_MARKERS = {
    "domain": "domain",
    "application": "application",
    "integration": "integration",
    "bdd": "domain",
}


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="protean config overlay (PROTEAN_ENV) to run the suite against",
    )


def pytest_sessionstart(session):
    """Select the config overlay before any domain module is imported.

    Each context's conftest initializes and activates its own domain.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    for item in items:
        parts = Path(item.fspath).parts
        for directory, marker in _LAYER_MARKERS.items():
            if directory in parts:
                item.add_marker(getattr(pytest.mark, marker))
                break
        if "integration" in parts and not any(m.name == "fast" for m in item.iter_markers()):
            item.add_marker(pytest.mark.slow)
