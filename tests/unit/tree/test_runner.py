"""Unit tests for scrub_paths, the top-level run over input paths."""

import errno
import stat
from pathlib import Path

from scrub.core.config import ScrubConfig
from scrub.tree.models import ErrorKind, NodeKind
from scrub.tree.runner import scrub_paths

from tests.fakes import FakeFilesystem

SIDECARS = ScrubConfig(clobber_extensions=("nfo", "md5sums"))


class TestScrubPaths:
    """Tests for scrub_paths."""

    def test_clean_tree_exits_zero(self, fake_fs: FakeFilesystem) -> None:
        """Everything removable is removed and the input stays, empty."""
        fake_fs.add_file("downloads/oddball_folder/album.nfo")
        fake_fs.add_file("downloads/oddball_folder/album.md5sums")

        summary = scrub_paths(["downloads"], SIDECARS, fake_fs)

        assert fake_fs.exists("downloads")
        assert fake_fs.children("downloads") == []
        assert summary.residue == []
        assert summary.dirty is False
        assert summary.exit_code == 0
        assert len(summary.removed) == 3

    def test_residue_exits_enotempty(self, downloads_fs: FakeFilesystem) -> None:
        """Unmatched content makes the run report ENOTEMPTY."""
        summary = scrub_paths(["downloads"], SIDECARS, downloads_fs)

        assert downloads_fs.children("downloads") == ["art"]
        assert summary.residue == ["downloads"]
        assert summary.exit_code == errno.ENOTEMPTY

    def test_input_directory_never_removed(self, fake_fs: FakeFilesystem) -> None:
        fake_fs.add_dir("downloads")

        summary = scrub_paths(["downloads"], ScrubConfig(), fake_fs)

        assert fake_fs.exists("downloads")
        assert summary.results == []
        assert summary.exit_code == 0

    def test_file_input_is_matched(self, fake_fs: FakeFilesystem) -> None:
        """Non-directory inputs go straight to the file check."""
        fake_fs.add_file("incoming/album.nfo")
        fake_fs.add_file("incoming/cover.jpg")

        summary = scrub_paths(["incoming/album.nfo", "incoming/cover.jpg"], SIDECARS, fake_fs)

        assert fake_fs.children("incoming") == ["cover.jpg"]
        assert [r.path for r in summary.results] == ["incoming/album.nfo"]
        assert summary.exit_code == 0

    def test_special_input_preserved(self, fake_fs: FakeFilesystem) -> None:
        fake_fs.add_special("incoming/pipe.nfo", stat.S_IFIFO)
        config = SIDECARS.merged(preserve_special=True)

        summary = scrub_paths(["incoming/pipe.nfo"], config, fake_fs)

        assert fake_fs.exists("incoming/pipe.nfo")
        assert summary.results == []

    def test_missing_input_is_skipped(self, fake_fs: FakeFilesystem) -> None:
        fake_fs.add_file("real/album.nfo")

        summary = scrub_paths(["missing", "real"], SIDECARS, fake_fs)

        assert [r.path for r in summary.results] == ["real/album.nfo"]
        assert summary.exit_code == 0

    def test_unreadable_input_is_residue(self, fake_fs: FakeFilesystem) -> None:
        """An input directory that cannot be listed counts as not empty."""
        fake_fs.add_file("locked/album.nfo")
        fake_fs.unreadable.add("locked")

        summary = scrub_paths(["locked"], SIDECARS, fake_fs)

        assert summary.residue == ["locked"]
        assert summary.exit_code == errno.ENOTEMPTY
        assert {e.kind for e in summary.errors} == {ErrorKind.DIRECTORY_OPEN}

    def test_multiple_inputs_one_dirty(self, fake_fs: FakeFilesystem) -> None:
        fake_fs.add_file("a/x.nfo")
        fake_fs.add_file("b/keep.txt")

        summary = scrub_paths(["a", "b"], SIDECARS, fake_fs)

        assert summary.residue == ["b"]
        assert summary.exit_code == errno.ENOTEMPTY

    def test_simulate_reports_residue(self, fake_fs: FakeFilesystem) -> None:
        """Simulated removals never empty anything, so residue remains."""
        fake_fs.add_file("downloads/oddball_folder/album.nfo")
        fake_fs.add_file("downloads/oddball_folder/album.md5sums")

        summary = scrub_paths(["downloads"], SIDECARS.merged(simulate=True), fake_fs)

        assert fake_fs.removed == []
        assert len(summary.results) == 2
        assert all(r.simulated for r in summary.results)
        assert summary.residue == ["downloads"]

    def test_failures_collected(self, fake_fs: FakeFilesystem) -> None:
        fake_fs.add_file("root/a.nfo")
        fake_fs.unremovable["root/a.nfo"] = errno.EACCES

        summary = scrub_paths(["root"], SIDECARS, fake_fs)

        assert len(summary.failed) == 1
        assert summary.failed[0].kind == NodeKind.REGULAR_FILE
        assert summary.errors[0].errno == errno.EACCES
        assert summary.residue == ["root"]


class TestScrubPathsLocal:
    """scrub_paths against the real filesystem."""

    def test_default_filesystem(self, tmp_path: Path) -> None:
        album = tmp_path / "album"
        album.mkdir()
        (album / "album.nfo").write_text("nfo")

        summary = scrub_paths([str(tmp_path)], SIDECARS)

        assert list(tmp_path.iterdir()) == []
        assert summary.exit_code == 0
