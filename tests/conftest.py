"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Iterator

import pytest

from tests.fakes import FakeFilesystem


@pytest.fixture
def fake_fs() -> FakeFilesystem:
    """Empty in-memory filesystem."""
    return FakeFilesystem()


@pytest.fixture
def downloads_fs() -> FakeFilesystem:
    """Tree with an empty folder, a sidecar-only folder and an artwork folder."""
    fs = FakeFilesystem()
    fs.add_dir("downloads")
    fs.add_dir("downloads/empty_folder")
    fs.add_file("downloads/oddball_folder/album.nfo")
    fs.add_file("downloads/oddball_folder/album.md5sums")
    fs.add_file("downloads/art/important.png")
    return fs


@pytest.fixture(autouse=True)
def reset_scrub_logger() -> Iterator[None]:
    """Undo handler and level changes made by the CLI logging setup."""
    yield
    logger = logging.getLogger("scrub")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
