"""Top-level scrub run over a list of input paths."""

import logging
from collections.abc import Iterable

from scrub.core.config import ScrubConfig
from scrub.tree.backend import Filesystem, LocalFilesystem
from scrub.tree.classifier import kind_from_mode
from scrub.tree.models import NodeKind, RunSummary
from scrub.tree.walker import TreeWalker

logger = logging.getLogger(__name__)


def scrub_paths(
    paths: Iterable[str],
    config: ScrubConfig,
    filesystem: Filesystem | None = None,
) -> RunSummary:
    """Scrub each input path and report what happened.

    Directories are walked and pruned, but the input directory itself
    is never removed; if it still has content afterwards it is
    reported as residue. Any other input is handled as a single node
    and deleted only if its name matches. Symlinks given as input are
    not followed.

    Args:
        paths: Input paths, as given by the user.
        config: Read-only run configuration.
        filesystem: Filesystem primitives. Defaults to LocalFilesystem.

    Returns:
        RunSummary with all removal results, errors, and residue.
    """
    filesystem = filesystem if filesystem is not None else LocalFilesystem()
    walker = TreeWalker(config, filesystem)
    summary = RunSummary()

    for path in paths:
        try:
            kind = kind_from_mode(filesystem.lstat(path).st_mode)
        except OSError as e:
            logger.warning("Cannot access %s: %s", path, e.strerror or e)
            continue

        if kind == NodeKind.DIRECTORY:
            logger.info("Processing directory %s", path)
            error = walker.process_directory(path)
            if error is not None:
                walker.errors.append(error)
                logger.error("Could not process directory %s", error)

            if not walker.is_empty(path):
                summary.residue.append(path)
        elif kind.is_special and config.preserve_special:
            logger.info("Preserving special file %s", path)
        else:
            logger.info("Processing node %s", path)
            walker.process_file(path, kind)

    summary.results.extend(walker.results)
    summary.errors.extend(walker.errors)
    return summary
