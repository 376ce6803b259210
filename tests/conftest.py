# tests/conftest.py
import pytest


SUITE_MARKERS = ("unit", "integration", "e2e")


def pytest_collection_modifyitems(items):
    """Mark every test with the suite named by its directory."""
    for item in items:
        path = str(item.fspath)
        for marker in SUITE_MARKERS:
            if f"/{marker}/" in path:
                item.add_marker(getattr(pytest.mark, marker))
