"""Scrub run configuration.

This module provides the read-only configuration model consumed by
the tree walker, and the loader for the optional defaults file.

Defaults are stored in ~/.config/scrub/config.toml, for example::

    clobber_extensions = ["nfo", "md5sums"]
    clobber_names = ["Thumbs.db"]
    preserve_hidden = true
"""

import tomllib
from collections.abc import Iterable
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from scrub.core.paths import get_config_path


class ScrubConfig(BaseModel):
    """Configuration for a scrub run.

    Constructed once before traversal and never modified afterwards.

    Attributes:
        clobber_names: Exact file names to delete.
        clobber_extensions: Exact extensions (without the dot) to delete.
        preserve_hidden: Treat hidden directories as traversal barriers.
        preserve_special: Never delete devices, FIFOs, sockets and symlinks.
        simulate: Report removals instead of performing them.
        verbose: Log progress and skipped entries.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    clobber_names: Annotated[
        tuple[str, ...],
        Field(description="File names to delete"),
    ] = ()
    clobber_extensions: Annotated[
        tuple[str, ...],
        Field(description="File extensions to delete"),
    ] = ()
    preserve_hidden: Annotated[
        bool,
        Field(description="Do not enter or remove hidden directories"),
    ] = False
    preserve_special: Annotated[
        bool,
        Field(description="Do not delete special files"),
    ] = False
    simulate: Annotated[
        bool,
        Field(description="Only report what would be removed"),
    ] = False
    verbose: Annotated[
        bool,
        Field(description="Verbose logging output"),
    ] = False

    def merged(
        self,
        *,
        clobber_names: Iterable[str] = (),
        clobber_extensions: Iterable[str] = (),
        preserve_hidden: bool = False,
        preserve_special: bool = False,
        simulate: bool = False,
        verbose: bool = False,
    ) -> "ScrubConfig":
        """Return a new config with command-line options layered on top.

        Lists are concatenated and flags are OR-ed, so a command-line
        flag can enable but never disable a setting from the file.

        Returns:
            New ScrubConfig instance.
        """
        return ScrubConfig(
            clobber_names=(*self.clobber_names, *clobber_names),
            clobber_extensions=(*self.clobber_extensions, *clobber_extensions),
            preserve_hidden=self.preserve_hidden or preserve_hidden,
            preserve_special=self.preserve_special or preserve_special,
            simulate=self.simulate or simulate,
            verbose=self.verbose or verbose,
        )


class ScrubConfigError(Exception):
    """Base exception for scrub configuration errors."""


class ScrubConfigNotFoundError(ScrubConfigError):
    """Raised when the config file is not found."""


class ScrubConfigParseError(ScrubConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> ScrubConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated ScrubConfig object.

    Raises:
        ScrubConfigNotFoundError: If the config file doesn't exist.
        ScrubConfigParseError: If the TOML syntax is invalid.
        ScrubConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ScrubConfigNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ScrubConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ScrubConfigError(f"Failed to read config file: {e}") from e

    try:
        return ScrubConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ScrubConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> ScrubConfig:
    """Load configuration, falling back to defaults when no file exists.

    An explicitly given path must exist; the default path is optional.

    Args:
        path: Explicit config file path, or None for the default location.

    Returns:
        ScrubConfig loaded from disk, or the default ScrubConfig.

    Raises:
        ScrubConfigError: If an existing file is invalid, or an explicit
            path does not exist.
    """
    if path is None and not get_config_path().exists():
        return ScrubConfig()
    return load_config(path)
