"""Node classification for directory entries.

Uses the type hint reported by the directory listing when there is
one, and falls back to an ``lstat`` probe otherwise. Filesystems that
report no type and cannot be probed yield ``NodeKind.UNKNOWN``, which
the walker treats like a regular file.
"""

import logging
import os
import stat
from collections.abc import Callable

from scrub.tree.models import NodeKind

logger = logging.getLogger(__name__)


def kind_from_mode(mode: int) -> NodeKind:
    """Map an ``st_mode`` value to a NodeKind.

    Args:
        mode: File mode as returned by ``lstat``.

    Returns:
        NodeKind for the mode, UNKNOWN if the file type is not recognized.
    """
    if stat.S_ISDIR(mode):
        return NodeKind.DIRECTORY
    if stat.S_ISREG(mode):
        return NodeKind.REGULAR_FILE
    if stat.S_ISLNK(mode):
        return NodeKind.SYMBOLIC_LINK
    if stat.S_ISBLK(mode) or stat.S_ISCHR(mode) or stat.S_ISFIFO(mode) or stat.S_ISSOCK(mode):
        return NodeKind.SPECIAL_FILE
    return NodeKind.UNKNOWN


def classify(hint: NodeKind | None, probe: Callable[[], os.stat_result]) -> NodeKind:
    """Classify a directory entry.

    Args:
        hint: Type reported by the listing, or None if not reported.
        probe: Zero-argument callable performing ``lstat`` on the entry.

    Returns:
        The entry's NodeKind.
    """
    if hint is not None:
        return hint

    try:
        return kind_from_mode(probe().st_mode)
    except OSError as e:
        logger.debug("Cannot probe node type, treating as unknown: %s", e)
        return NodeKind.UNKNOWN
