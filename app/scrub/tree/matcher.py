"""File name matching against the configured clobber lists.

Matching is exact string equality: no globbing, no regular
expressions and no case folding. A name is clobbered when it equals
one of the configured names, or when its extension (the text after
the last ``.``) equals one of the configured extensions.
"""

from collections.abc import Iterable


def extension_of(name: str) -> str | None:
    """Return the extension of a base name, or None if it has no ``.``.

    The extension is everything after the last dot. A leading dot is
    not special: ``.bashrc`` has the extension ``"bashrc"`` and
    ``archive.`` has the empty extension ``""``.

    Args:
        name: File base name.

    Returns:
        Extension string, or None when the name contains no dot.
    """
    _, dot, extension = name.rpartition(".")
    if not dot:
        return None
    return extension


def is_hidden(name: str) -> bool:
    """Check if a base name is hidden (starts with ``.``)."""
    return name.startswith(".")


class Matcher:
    """Decides whether a file base name should be clobbered.

    Args:
        names: Exact file names to clobber.
        extensions: Exact extensions (without the dot) to clobber.
    """

    def __init__(self, names: Iterable[str] = (), extensions: Iterable[str] = ()) -> None:
        # Duplicates are harmless; lookups are linear scans over small lists.
        self._names = tuple(names)
        self._extensions = tuple(extensions)

    def should_clobber_name(self, name: str) -> bool:
        """Check if a base name is in the name list."""
        return any(name == candidate for candidate in self._names)

    def should_clobber_extension(self, extension: str) -> bool:
        """Check if an extension is in the extension list."""
        return any(extension == candidate for candidate in self._extensions)

    def should_clobber(self, name: str) -> bool:
        """Check if a base name matches by full name or by extension.

        Args:
            name: File base name (no directory prefix).

        Returns:
            True if the file should be clobbered.
        """
        if self.should_clobber_name(name):
            return True

        extension = extension_of(name)
        if extension is None:
            return False
        return self.should_clobber_extension(extension)
