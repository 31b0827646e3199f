"""Tree pruning domain models.

This module defines the data structures shared by the tree walker,
the deletion operator, and the CLI: node classifications, the tagged
error type that replaces raw errno values, per-removal results, and
the summary of a whole run.
"""

import errno
from dataclasses import dataclass, field
from enum import Enum


class NodeKind(str, Enum):
    """Type of filesystem node encountered while walking a tree.

    Attributes:
        DIRECTORY: Directory, recursed into.
        REGULAR_FILE: Regular file, candidate for clobbering.
        SPECIAL_FILE: Block/character device, FIFO or socket.
        SYMBOLIC_LINK: Symbolic link (never followed).
        UNKNOWN: Type could not be determined; handled like a regular file.
    """

    DIRECTORY = "directory"
    REGULAR_FILE = "file"
    SPECIAL_FILE = "special"
    SYMBOLIC_LINK = "symlink"
    UNKNOWN = "unknown"

    @property
    def is_special(self) -> bool:
        """Check if this kind falls under the special-file preservation policy."""
        return self in (NodeKind.SPECIAL_FILE, NodeKind.SYMBOLIC_LINK)


class ErrorKind(str, Enum):
    """Category of a failure captured during traversal.

    Attributes:
        DIRECTORY_OPEN: A directory's contents could not be listed.
        DELETION: Removing a file or directory failed.
    """

    DIRECTORY_OPEN = "directory_open"
    DELETION = "deletion"


@dataclass(frozen=True, slots=True)
class ScrubError:
    """A failure captured at the level where it occurred.

    Attributes:
        kind: Failure category.
        path: Path the failure relates to.
        errno: Underlying OS error code, None if not available.
        message: Human-readable description.
    """

    kind: ErrorKind
    path: str
    errno: int | None
    message: str

    @classmethod
    def from_os_error(cls, kind: ErrorKind, path: str, exc: OSError) -> "ScrubError":
        """Build a ScrubError from an OSError, keeping its errno."""
        return cls(
            kind=kind,
            path=path,
            errno=exc.errno,
            message=exc.strerror or str(exc),
        )

    def __str__(self) -> str:
        code = f" (errno {self.errno})" if self.errno is not None else ""
        return f"{self.path}: {self.message}{code}"


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Result of a single removal attempt.

    Attributes:
        path: Path that was operated on.
        kind: Node kind as classified by the caller.
        success: Whether the removal completed (or was simulated).
        error: Captured failure, None on success.
        simulated: Whether this was only reported, not performed.
    """

    path: str
    kind: NodeKind
    success: bool
    error: ScrubError | None = None
    simulated: bool = False


@dataclass(slots=True)
class RunSummary:
    """Outcome of scrubbing a set of input paths.

    Attributes:
        results: Every removal attempt, in traversal order.
        errors: Failures that were logged and contained.
        residue: Input directories that still hold content afterwards.
    """

    results: list[ActionResult] = field(default_factory=list)
    errors: list[ScrubError] = field(default_factory=list)
    residue: list[str] = field(default_factory=list)

    @property
    def dirty(self) -> bool:
        """Check if any input directory kept residue."""
        return bool(self.residue)

    @property
    def removed(self) -> list[ActionResult]:
        """Successful (or simulated) removals."""
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[ActionResult]:
        """Removal attempts that failed."""
        return [r for r in self.results if not r.success]

    @property
    def exit_code(self) -> int:
        """Process exit code for this run: 0 or ENOTEMPTY."""
        return errno.ENOTEMPTY if self.dirty else 0
