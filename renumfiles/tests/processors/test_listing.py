"""Unit tests for resolving target patterns."""

from pathlib import Path

import pytest

from renumfiles.processors.listing import (
    DEFAULT_PATTERN,
    DirectoryAccessError,
    resolve_listing,
    split_target_pattern,
)


@pytest.fixture
def picture_dir(tmp_path: Path) -> Path:
    """Directory holding a few numbered pictures and a subdirectory."""
    for name in ["picture1.png", "picture10.jpg", "picture10.png", "picture2.png", "notes.txt"]:
        (tmp_path / name).touch()
    (tmp_path / "album3.png").mkdir()
    return tmp_path


class TestSplitTargetPattern:
    """Tests for split_target_pattern."""

    @pytest.mark.parametrize("pattern", [None, "", "   "])
    def test_blank_pattern_defaults_to_everything(self, pattern, tmp_path):
        """Test that a blank pattern selects every entry of the working directory."""
        assert split_target_pattern(pattern, cwd=tmp_path) == (tmp_path, DEFAULT_PATTERN)

    def test_name_only_uses_cwd(self, tmp_path):
        """Test that a bare name pattern is resolved against the working directory."""
        assert split_target_pattern("*.png", cwd=tmp_path) == (tmp_path, "*.png")

    def test_relative_directory(self, tmp_path):
        """Test that a relative directory is made absolute."""
        assert split_target_pattern("sub/pic?.png", cwd=tmp_path) == (tmp_path / "sub", "pic?.png")

    def test_parent_directory_is_normalized(self, tmp_path):
        """Test that '..' components are collapsed."""
        assert split_target_pattern("../*", cwd=tmp_path) == (tmp_path.parent, "*")

    def test_absolute_directory(self, tmp_path):
        """Test that an absolute pattern ignores the working directory."""
        other = tmp_path / "elsewhere"
        assert split_target_pattern(str(other / "*.jpg"), cwd=tmp_path) == (other, "*.jpg")

    def test_trailing_separator_has_empty_name(self, tmp_path):
        """Test that a pattern ending in a separator has no name part."""
        assert split_target_pattern("sub/", cwd=tmp_path) == (tmp_path / "sub", "")


class TestResolveListing:
    """Tests for resolve_listing."""

    def test_matches_glob(self, picture_dir):
        """Test that only names matching the glob are listed."""
        listing = resolve_listing("*.png", cwd=picture_dir)

        assert listing.directory == picture_dir
        assert sorted(listing.names) == ["album3.png", "picture1.png", "picture10.png", "picture2.png"]

    def test_includes_directories(self, picture_dir):
        """Test that matching subdirectories are listed alongside files."""
        listing = resolve_listing("album*", cwd=picture_dir)

        assert listing.names == ["album3.png"]

    def test_question_mark_wildcard(self, picture_dir):
        """Test single-character wildcards."""
        listing = resolve_listing("picture?.png", cwd=picture_dir)

        assert sorted(listing.names) == ["picture1.png", "picture2.png"]

    def test_blank_pattern_lists_everything(self, picture_dir):
        """Test that a blank pattern lists every entry."""
        listing = resolve_listing(None, cwd=picture_dir)

        assert len(listing) == 6

    def test_is_not_recursive(self, picture_dir):
        """Test that entries inside subdirectories are not listed."""
        (picture_dir / "album3.png" / "inner1.png").touch()

        listing = resolve_listing("*", cwd=picture_dir)

        assert "inner1.png" not in listing.names

    def test_trailing_separator_lists_nothing(self, picture_dir):
        """Test that a directory-only pattern matches no entries."""
        listing = resolve_listing("album3.png/", cwd=picture_dir)

        assert listing.names == []

    def test_missing_directory_raises(self, tmp_path):
        """Test that a missing directory raises DirectoryAccessError."""
        with pytest.raises(DirectoryAccessError, match="Cannot list directory"):
            resolve_listing("missing/*.png", cwd=tmp_path)

    def test_file_as_directory_raises(self, picture_dir):
        """Test that a file used as the directory part raises DirectoryAccessError."""
        with pytest.raises(DirectoryAccessError):
            resolve_listing("notes.txt/*", cwd=picture_dir)

    def test_directory_error_is_oserror(self, tmp_path):
        """Test that DirectoryAccessError can be handled as an OSError."""
        with pytest.raises(OSError):
            resolve_listing("missing/*", cwd=tmp_path)
