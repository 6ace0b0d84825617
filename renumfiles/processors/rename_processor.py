"""Apply renumbered names to the entries of a directory."""

import os
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from renumfiles.models.invocation import RenameOp, RenameSummary
from renumfiles.processors.listing import resolve_listing
from renumfiles.processors.renumber import renumber


class RenumberProcessor:
    """Processor that renumbers every entry matching a target pattern."""

    def __init__(self, fmt: str, console: Console | None = None) -> None:
        """Initialize the processor.

        Args:
            fmt: Numeric format string applied to each digit run.
            console: Rich console used for progress output.
        """
        self.fmt = fmt
        self.console = console or Console(highlight=False, soft_wrap=True)

    def rename_entry(self, directory: Path, source_name: str, target_name: str) -> None:
        """Move ``source_name`` to ``target_name`` within ``directory``.

        Renaming an entry to its own name is a no-op.

        Raises:
            FileNotFoundError: If the source entry doesn't exist.
            FileExistsError: If another entry already has the target name.
        """
        source = directory / source_name
        target = directory / target_name

        if source_name != target_name and (target.is_symlink() or target.exists()):
            # Only a case-only rename of the very same entry may proceed.
            same_entry = source_name.lower() == target_name.lower() and os.path.samestat(
                source.lstat(), target.lstat()
            )
            if not same_entry:
                raise FileExistsError(f"Cannot rename '{source_name}': '{target_name}' already exists")

        source.rename(target)

    def run(self, target_pattern: str | None) -> RenameSummary:
        """Renumber all entries matching ``target_pattern``.

        A failed rename is reported and skipped; the remaining entries are
        still processed.

        Returns:
            RenameSummary with one operation per listed entry.

        Raises:
            DirectoryAccessError: If the target directory cannot be listed.
        """
        listing = resolve_listing(target_pattern)
        self.console.print(f"Directory: {escape(str(listing.directory))}")

        summary = RenameSummary(directory=listing.directory)
        for name in listing.names:
            op = RenameOp(source_name=name, target_name=renumber(name, self.fmt))
            self.console.print(escape(str(op)))

            try:
                self.rename_entry(listing.directory, op.source_name, op.target_name)
            except OSError as e:
                op.succeeded = False
                op.error = str(e)
                self.console.print(f"[red]Error:[/red] {escape(op.error)}")

            summary.operations.append(op)

        return summary
