"""Filesystem primitives used by the tree walker.

The walker never calls ``os`` directly. It goes through a
``Filesystem`` object so that tests can substitute an in-memory tree.
``LocalFilesystem`` is the implementation backed by the real
filesystem.
"""

import os
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from typing import Protocol

from scrub.tree.models import NodeKind

# (entry name, type hint from the listing or None when not reported)
DirEntry = tuple[str, NodeKind | None]


class Filesystem(Protocol):
    """Listing, type probing, and removal primitives.

    All methods raise ``OSError`` on failure.
    """

    def scandir(self, path: str) -> AbstractContextManager[Iterator[DirEntry]]:
        """Open a directory listing as a context manager yielding DirEntry pairs."""
        ...

    def lstat(self, path: str) -> os.stat_result:
        """Return status information without following symlinks."""
        ...

    def unlink(self, path: str) -> None:
        """Remove a non-directory node."""
        ...

    def rmdir(self, path: str) -> None:
        """Remove an empty directory."""
        ...


class LocalFilesystem:
    """Filesystem backed by ``os``."""

    @contextmanager
    def scandir(self, path: str) -> Iterator[Iterator[DirEntry]]:
        """List a directory, yielding ``(name, hint)`` pairs.

        The iterator is closed when the context exits, so callers may
        stop reading early.

        Raises:
            OSError: If the directory cannot be opened.
        """
        with os.scandir(path) as it:
            yield ((entry.name, _hint_from_entry(entry)) for entry in it)

    def lstat(self, path: str) -> os.stat_result:
        return os.lstat(path)

    def unlink(self, path: str) -> None:
        os.unlink(path)

    def rmdir(self, path: str) -> None:
        os.rmdir(path)


def _hint_from_entry(entry: os.DirEntry[str]) -> NodeKind | None:
    """Derive a type hint from a scandir entry.

    ``DirEntry`` answers these checks from the listing's cached type
    where the filesystem reports one, and falls back to a stat call
    otherwise. Devices, FIFOs and sockets are not distinguishable here,
    and neither is an entry whose stat call fails, so those get no hint
    and are probed by the classifier.
    """
    try:
        if entry.is_symlink():
            return NodeKind.SYMBOLIC_LINK
        if entry.is_dir(follow_symlinks=False):
            return NodeKind.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return NodeKind.REGULAR_FILE
    except OSError:
        return None
    return None
