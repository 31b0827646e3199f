"""Node deletion operator.

Performs the removal of single filesystem nodes with simulate-mode
support. Directories are removed with ``rmdir`` only, so a directory
that gained content since it was checked is never deleted.
"""

import logging
import stat

from scrub.tree.backend import Filesystem, LocalFilesystem
from scrub.tree.models import ActionResult, ErrorKind, NodeKind, ScrubError

logger = logging.getLogger(__name__)


class DeletionOperator:
    """Removes files and empty directories.

    Attributes:
        _filesystem: Filesystem primitives to operate on.
        _simulate: If True, report removals without performing them.
    """

    def __init__(self, filesystem: Filesystem | None = None, simulate: bool = False) -> None:
        """Initialize the DeletionOperator.

        Args:
            filesystem: Filesystem primitives. Defaults to LocalFilesystem.
            simulate: If True, report what would be removed without removing.
        """
        self._filesystem = filesystem if filesystem is not None else LocalFilesystem()
        self._simulate = simulate

    def remove(self, path: str, kind: NodeKind) -> ActionResult:
        """Remove a single node.

        The node type is probed again right before removal instead of
        trusting ``kind``, since the tree may have changed since it was
        listed:
        - Directories: rmdir
        - Everything else (files, links, special files): unlink

        Args:
            path: Path of the node to remove.
            kind: Classification made by the caller, kept for reporting.

        Returns:
            ActionResult indicating success or failure.
        """
        if self._simulate:
            logger.info("Simulate: would remove %s", path)
            return ActionResult(path=path, kind=kind, success=True, simulated=True)

        try:
            if self._is_directory(path):
                self._filesystem.rmdir(path)
            else:
                self._filesystem.unlink(path)
        except OSError as e:
            return ActionResult(
                path=path,
                kind=kind,
                success=False,
                error=ScrubError.from_os_error(ErrorKind.DELETION, path, e),
            )

        logger.info("Removed %s", path)
        return ActionResult(path=path, kind=kind, success=True)

    def _is_directory(self, path: str) -> bool:
        """Check if a path currently is a directory (symlinks not followed).

        A failed probe counts as "not a directory"; the following unlink
        then reports the actual error.
        """
        try:
            return stat.S_ISDIR(self._filesystem.lstat(path).st_mode)
        except OSError:
            return False
