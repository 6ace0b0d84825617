"""Unit tests for data models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from renumfiles.models.invocation import DirectoryListing, InvocationRequest, RenameOp, RenameSummary


class TestInvocationRequest:
    """Tests for InvocationRequest model."""

    @pytest.mark.parametrize(
        "target_pattern,fmt,expected",
        [
            ("*.png", "000", True),
            ("*.png", None, False),
            ("*.png", "", False),
            ("*.png", "   ", False),
            (None, "000", False),
            ("", "000", False),
            (" \t", "000", False),
            (None, None, False),
        ],
    )
    def test_is_valid(self, target_pattern, fmt, expected):
        """Test that both fields must be present and non-blank."""
        request = InvocationRequest(target_pattern=target_pattern, format=fmt)

        assert request.is_valid is expected

    def test_defaults(self):
        """Test that an empty request is invalid."""
        request = InvocationRequest()

        assert request.target_pattern is None
        assert request.format is None
        assert not request.is_valid

    def test_is_frozen(self):
        """Test that the request cannot be modified after construction."""
        request = InvocationRequest(target_pattern="*.png", format="000")

        with pytest.raises(ValidationError):
            request.format = "D4"


class TestRenameOp:
    """Tests for RenameOp model."""

    def test_str_representation(self):
        """Test the old -> new rendering."""
        op = RenameOp(source_name="picture1.png", target_name="picture001.png")

        assert str(op) == "picture1.png -> picture001.png"

    def test_defaults_to_success(self):
        """Test that a fresh operation is successful with no error."""
        op = RenameOp(source_name="a", target_name="a")

        assert op.succeeded
        assert op.error is None


class TestRenameSummary:
    """Tests for RenameSummary model."""

    def test_failures(self):
        """Test that failures lists only failed operations."""
        ok = RenameOp(source_name="a1", target_name="a001")
        failed = RenameOp(source_name="b1", target_name="b001", succeeded=False, error="exists")
        summary = RenameSummary(directory=Path("/pictures"), operations=[ok, failed])

        assert len(summary) == 2
        assert summary.failures == [failed]


class TestDirectoryListing:
    """Tests for DirectoryListing model."""

    def test_len(self):
        """Test that len() counts listed names."""
        listing = DirectoryListing(directory=Path("/pictures"), names=["a1.png", "a2.png"])

        assert len(listing) == 2
