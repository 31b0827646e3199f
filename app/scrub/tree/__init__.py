"""Tree pruning module.

This module provides the matcher, node classifier, deletion operator
and recursive walker that together prune clobbered files and the
empty directories they leave behind.
"""

from scrub.tree.backend import Filesystem, LocalFilesystem
from scrub.tree.classifier import classify, kind_from_mode
from scrub.tree.matcher import Matcher, extension_of, is_hidden
from scrub.tree.models import ActionResult, ErrorKind, NodeKind, RunSummary, ScrubError
from scrub.tree.operator import DeletionOperator
from scrub.tree.runner import scrub_paths
from scrub.tree.walker import TreeWalker

__all__ = [
    "ActionResult",
    "DeletionOperator",
    "ErrorKind",
    "Filesystem",
    "LocalFilesystem",
    "Matcher",
    "NodeKind",
    "RunSummary",
    "ScrubError",
    "TreeWalker",
    "classify",
    "extension_of",
    "is_hidden",
    "kind_from_mode",
    "scrub_paths",
]
