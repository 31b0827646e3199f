"""Unit tests for the clobber Matcher and name helpers."""

import pytest
from scrub.tree.matcher import Matcher, extension_of, is_hidden


class TestExtensionOf:
    """Tests for extension_of."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("album.nfo", "nfo"),
            ("archive.tar.gz", "gz"),
            ("README", None),
            (".bashrc", "bashrc"),
            ("archive.", ""),
            (".config.bak", "bak"),
        ],
    )
    def test_extension_after_last_dot(self, name: str, expected: str | None) -> None:
        """Extension is the text after the last dot, None without a dot."""
        assert extension_of(name) == expected


class TestIsHidden:
    """Tests for is_hidden."""

    def test_leading_dot_is_hidden(self) -> None:
        assert is_hidden(".git") is True
        assert is_hidden(".bashrc") is True

    def test_dot_elsewhere_is_not_hidden(self) -> None:
        """Only the first character decides."""
        assert is_hidden("album.nfo") is False
        assert is_hidden("a.") is False

    def test_no_dot_is_not_hidden(self) -> None:
        assert is_hidden("music") is False
        assert is_hidden("") is False


class TestMatcher:
    """Tests for Matcher."""

    def test_name_match(self) -> None:
        """Exact name match clobbers regardless of extension list."""
        matcher = Matcher(names=["Thumbs.db"])
        assert matcher.should_clobber("Thumbs.db") is True
        assert matcher.should_clobber_name("Thumbs.db") is True

    def test_extension_match(self) -> None:
        """Extension match clobbers files with that last extension."""
        matcher = Matcher(extensions=["nfo", "md5sums"])
        assert matcher.should_clobber("album.nfo") is True
        assert matcher.should_clobber("album.md5sums") is True
        assert matcher.should_clobber("important.png") is False

    def test_matching_is_case_sensitive(self) -> None:
        matcher = Matcher(names=["thumbs.db"], extensions=["nfo"])
        assert matcher.should_clobber("Thumbs.db") is False
        assert matcher.should_clobber("album.NFO") is False

    def test_no_wildcards(self) -> None:
        """Glob characters are matched literally."""
        matcher = Matcher(names=["*.nfo"], extensions=["*"])
        assert matcher.should_clobber("album.nfo") is False
        assert matcher.should_clobber("*.nfo") is True
        assert matcher.should_clobber("file.*") is True

    def test_only_last_extension_counts(self) -> None:
        matcher = Matcher(extensions=["tar"])
        assert matcher.should_clobber("archive.tar.gz") is False
        assert matcher.should_clobber("archive.tar") is True

    def test_name_without_dot_matches_only_by_name(self) -> None:
        """A name without a dot never matches through the extension list."""
        matcher = Matcher(extensions=["README", ""])
        assert matcher.should_clobber("README") is False

    def test_dotfile_extension(self) -> None:
        """.bashrc has the extension 'bashrc'."""
        matcher = Matcher(extensions=["bashrc"])
        assert matcher.should_clobber(".bashrc") is True

    def test_empty_extension_only_matches_when_configured(self) -> None:
        assert Matcher(extensions=["nfo"]).should_clobber("archive.") is False
        assert Matcher(extensions=[""]).should_clobber("archive.") is True

    def test_duplicates_are_harmless(self) -> None:
        matcher = Matcher(names=["a", "a"], extensions=["nfo", "nfo"])
        assert matcher.should_clobber("a") is True
        assert matcher.should_clobber("x.nfo") is True

    def test_empty_lists_match_nothing(self) -> None:
        matcher = Matcher()
        assert matcher.should_clobber("album.nfo") is False
        assert matcher.should_clobber("") is False

    @pytest.mark.parametrize("name", ["a.nfo", "Thumbs.db", "b.txt", "nfo", ".nfo", "x.y.nfo"])
    def test_name_or_extension(self, name: str) -> None:
        """should_clobber is the OR of name match and extension match."""
        names = ["Thumbs.db"]
        extensions = ["nfo"]
        matcher = Matcher(names, extensions)

        ext = name.rpartition(".")[2] if "." in name else None
        expected = name in names or (ext is not None and ext in extensions)

        assert matcher.should_clobber(name) is expected
