"""Recursive, bottom-up tree walker.

Deletes files matching the clobber lists and removes every
subdirectory that is empty once its own children have been
processed, so removals cascade upward through nested folders.

Failures are contained where they happen: they are logged and
recorded, and the walk carries on with the next entry.
"""

import logging
from contextlib import ExitStack

from scrub.core.config import ScrubConfig
from scrub.tree.backend import Filesystem, LocalFilesystem
from scrub.tree.classifier import classify
from scrub.tree.matcher import Matcher, is_hidden
from scrub.tree.models import ActionResult, ErrorKind, NodeKind, ScrubError
from scrub.tree.operator import DeletionOperator

logger = logging.getLogger(__name__)

# Self and parent entries, never classified or removed
_IMPLICIT_ENTRIES = frozenset({".", ".."})


def _base_name(path: str) -> str:
    return path.rstrip("/").rpartition("/")[2]


class TreeWalker:
    """Walks a directory tree and prunes it according to a ScrubConfig.

    Args:
        config: Read-only run configuration.
        filesystem: Filesystem primitives. Defaults to LocalFilesystem.

    Attributes:
        results: Every removal attempt made by this walker, in order.
        errors: Every failure logged by this walker, in order.
    """

    def __init__(self, config: ScrubConfig, filesystem: Filesystem | None = None) -> None:
        self._config = config
        self._filesystem = filesystem if filesystem is not None else LocalFilesystem()
        self._matcher = Matcher(config.clobber_names, config.clobber_extensions)
        self._operator = DeletionOperator(self._filesystem, simulate=config.simulate)

        self.results: list[ActionResult] = []
        self.errors: list[ScrubError] = []

    def process_file(self, path: str, kind: NodeKind = NodeKind.REGULAR_FILE) -> ScrubError | None:
        """Delete a single non-directory node if its name matches.

        Args:
            path: Path of the node.
            kind: Classification of the node, used for reporting.

        Returns:
            The deletion error, or None if nothing failed.
        """
        if not self._matcher.should_clobber(_base_name(path)):
            return None

        result = self._remove(path, kind)
        if result.error is not None:
            logger.error("Could not remove %s", result.error)
        return result.error

    def process_directory(self, path: str) -> ScrubError | None:
        """Process every entry of a directory, depth first.

        Subdirectories are processed before their own emptiness is
        checked, and are removed only once they turn out empty.

        Args:
            path: Directory to process.

        Returns:
            A DIRECTORY_OPEN error if the directory could not be opened,
            None otherwise. Failures of children are never returned.
        """
        with ExitStack() as stack:
            try:
                entries = stack.enter_context(self._filesystem.scandir(path))
            except OSError as e:
                return ScrubError.from_os_error(ErrorKind.DIRECTORY_OPEN, path, e)

            for name, hint in entries:
                if name in _IMPLICIT_ENTRIES:
                    continue
                self._process_entry(f"{path}/{name}", name, hint)

        return None

    def is_empty(self, path: str) -> bool:
        """Check if a directory has no entries besides ``.`` and ``..``.

        Stops reading at the first real entry. A directory that cannot
        be listed is reported as not empty.

        Args:
            path: Directory to check.

        Returns:
            True if the directory is empty.
        """
        try:
            with self._filesystem.scandir(path) as entries:
                return all(name in _IMPLICIT_ENTRIES for name, _ in entries)
        except OSError as e:
            error = ScrubError.from_os_error(ErrorKind.DIRECTORY_OPEN, path, e)
            self.errors.append(error)
            logger.error("Could not open directory %s", error)
            return False

    def _process_entry(self, path: str, name: str, hint: NodeKind | None) -> None:
        """Dispatch a single directory entry by its classification."""
        kind = classify(hint, lambda: self._filesystem.lstat(path))

        if kind == NodeKind.DIRECTORY:
            self._process_subdirectory(path, name)
            return

        if kind.is_special and self._config.preserve_special:
            logger.info("Preserving special file %s", path)
            return

        error = self.process_file(path, kind)
        if error is not None:
            logger.info("Processing %s failed: %s", path, error.message)

    def _process_subdirectory(self, path: str, name: str) -> None:
        """Recurse into a subdirectory and remove it if it ends up empty."""
        if self._config.preserve_hidden and is_hidden(name):
            logger.info("Preserving hidden directory %s", path)
            return

        error = self.process_directory(path)
        if error is not None:
            self.errors.append(error)
            logger.error("Could not process directory %s", error)
            return

        if not self.is_empty(path):
            logger.info("Directory %s is not empty, not removing", path)
            return

        result = self._remove(path, NodeKind.DIRECTORY)
        if result.error is not None:
            logger.error("Could not remove directory %s", result.error)

    def _remove(self, path: str, kind: NodeKind) -> ActionResult:
        result = self._operator.remove(path, kind)
        self.results.append(result)
        if result.error is not None:
            self.errors.append(result.error)
        return result
