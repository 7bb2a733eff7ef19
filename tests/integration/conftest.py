"""Integration tests need a migrated PostgreSQL at DATABASE__URL."""

import os

import pytest


def pytest_collection_modifyitems(config, items):
    if os.environ.get("DATABASE__URL"):
        return
    skip = pytest.mark.skip(reason="DATABASE__URL is not set")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)
