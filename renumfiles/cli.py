"""CLI entrypoint."""

import click
from rich.console import Console

from renumfiles.models.invocation import InvocationRequest
from renumfiles.processors.rename_processor import RenumberProcessor
from renumfiles.usage import USAGE


# Prefixes (compared case-insensitively) that mark an argument as the format flag
FORMAT_PREFIXES = ("/F", "-F")

console = Console(highlight=False, soft_wrap=True)


def is_format_argument(text: str) -> tuple[bool, str]:
    """Check whether ``text`` is a format flag such as ``/F000`` or ``-fD4``.

    Returns:
        Tuple of (is format flag, format value). The value is everything
        after the two-character prefix and may be empty.
    """
    if text[:2].upper() in FORMAT_PREFIXES:
        return True, text[2:]
    return False, ""


def analyze_command_line(args: list[str] | tuple[str, ...]) -> InvocationRequest:
    """Build an InvocationRequest from raw command-line arguments.

    The last format flag wins; the first other argument becomes the target
    pattern and any further ones are ignored.
    """
    target_pattern = None
    fmt = None
    for arg in args:
        is_format, value = is_format_argument(arg)
        if is_format:
            fmt = value
        elif target_pattern is None:
            target_pattern = arg
    return InvocationRequest(target_pattern=target_pattern, format=fmt)


@click.command(
    context_settings=dict(ignore_unknown_options=True),
    add_help_option=False,
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def cli(args: tuple[str, ...]) -> None:
    """renumfiles - Reformat the numbers embedded in file names."""
    request = analyze_command_line(args)
    if not request.is_valid:
        console.print(USAGE, markup=False)
        return

    processor = RenumberProcessor(fmt=request.format, console=console)
    processor.run(request.target_pattern)
