"""Reformat the digit runs embedded in a file name."""

from renumfiles.processors.number_format import NumberFormatError, format_number


# Digit runs above the signed 32-bit range are left untouched.
INT32_MAX = 2_147_483_647


def parse_digit_run(run: str) -> int | None:
    """Parse a digit run as a non-negative 32-bit integer.

    Only ASCII digits are accepted; runs made of other decimal digits
    (e.g. fullwidth or Arabic-Indic) and runs that overflow return None.
    """
    if not run or not run.isascii() or not run.isdigit():
        return None

    value = int(run)
    if value > INT32_MAX:
        return None
    return value


def reformat_digit_run(run: str, fmt: str) -> str:
    """Render a digit run with ``fmt``, falling back to the original text."""
    value = parse_digit_run(run)
    if value is None:
        return run

    try:
        return format_number(value, fmt)
    except NumberFormatError:
        return run


def renumber(name: str, fmt: str) -> str:
    """Reformat every run of decimal digits in ``name`` using ``fmt``.

    All other characters are copied through unchanged and keep their position
    relative to the digit runs.

    Args:
        name: File name to transform.
        fmt: Numeric format string, e.g. ``000`` or ``D4``.

    Returns:
        The renumbered name.
    """
    output: list[str] = []
    pending: list[str] = []

    for character in name:
        if character.isdecimal():
            pending.append(character)
            continue

        if pending:
            output.append(reformat_digit_run("".join(pending), fmt))
            pending.clear()
        output.append(character)

    if pending:
        output.append(reformat_digit_run("".join(pending), fmt))

    return "".join(output)
