"""Data models for a single renumbering run."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class InvocationRequest(BaseModel):
    """Target pattern and numeric format parsed from the command line."""

    model_config = ConfigDict(frozen=True)

    target_pattern: str | None = Field(default=None, description="Path, possibly with wildcards, of entries to rename")
    format: str | None = Field(default=None, description="Numeric format applied to each digit run")

    @property
    def is_valid(self) -> bool:
        """Both the target pattern and the format must be present and non-blank."""
        return bool(self.target_pattern and self.target_pattern.strip()) and bool(
            self.format and self.format.strip()
        )


class DirectoryListing(BaseModel):
    """Entries of a single directory that matched the target pattern."""

    directory: Path = Field(description="Absolute directory the names live in")
    names: list[str] = Field(default_factory=list, description="Matching entry names, in enumeration order")

    def __len__(self) -> int:
        return len(self.names)


class RenameOp(BaseModel):
    """Outcome of renaming one directory entry."""

    source_name: str = Field(description="Original entry name (without directory path)")
    target_name: str = Field(description="Renumbered entry name (without directory path)")
    succeeded: bool = Field(default=True, description="Whether the move completed")
    error: str | None = Field(default=None, description="Reason the move failed, if it did")

    def __str__(self) -> str:
        return f"{self.source_name} -> {self.target_name}"


class RenameSummary(BaseModel):
    """All rename operations attempted during a run."""

    directory: Path
    operations: list[RenameOp] = Field(default_factory=list)

    @property
    def failures(self) -> list[RenameOp]:
        return [op for op in self.operations if not op.succeeded]

    def __len__(self) -> int:
        return len(self.operations)
