"""Numeric format strings for rendering integers.

Supports the "standard" (``D4``, ``X8``, ``N0``...) and "custom" (``000``,
``#,##0``, ``'img'000``...) numeric format string grammars popularized by .NET,
rendered with invariant-culture symbols. Only non-negative integers are
formatted, since digit runs never carry a sign.
"""

import re


# Largest precision accepted by a standard format specifier such as ``D12``.
# Matches the usual 255-character limit on a single file name component.
MAX_PRECISION = 255

# Invariant-culture symbols
GROUP_SEPARATOR = ","
DECIMAL_SEPARATOR = "."
CURRENCY_SYMBOL = "¤"
PERCENT_SYMBOL = "%"
PER_MILLE_SYMBOL = "‰"

# A standard format is a single ASCII letter followed by an optional precision.
STANDARD_FORMAT_PATTERN = re.compile(r"^([A-Za-z])([0-9]*)$")

DIGIT_PLACEHOLDERS = ("0", "#")


class NumberFormatError(ValueError):
    """Raised when a numeric format string cannot be applied."""


def format_number(value: int, fmt: str) -> str:
    """Render a non-negative integer using a numeric format string.

    Args:
        value: The integer to render.
        fmt: A standard (``D4``) or custom (``000``) numeric format string.
            An empty string behaves like ``G``.

    Returns:
        The formatted text.

    Raises:
        NumberFormatError: If the format string is malformed or names an
            unsupported standard format.
    """
    if value < 0:
        raise NumberFormatError(f"Only non-negative values can be formatted, got {value}")

    if fmt == "":
        return _format_standard(value, "G", None)

    match = STANDARD_FORMAT_PATTERN.match(fmt)
    if match:
        letter, precision_text = match.groups()
        precision = None
        if precision_text:
            precision = int(precision_text)
            if precision > MAX_PRECISION:
                raise NumberFormatError(f"Precision {precision} exceeds the maximum of {MAX_PRECISION}")
        return _format_standard(value, letter, precision)

    return _format_custom(value, fmt)


def _group(digits: str) -> str:
    """Insert group separators every three digits, counting from the right."""
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i : i + 3] for i in range(head, len(digits), 3)]
    return GROUP_SEPARATOR.join(groups)


def _with_decimals(integer_text: str, decimals: int) -> str:
    if decimals <= 0:
        return integer_text
    return integer_text + DECIMAL_SEPARATOR + "0" * decimals


def _round_significant(value: int, count: int) -> tuple[str, int]:
    """Round a positive integer to ``count`` significant digits, half away from zero.

    Returns:
        A tuple of (significant digits, decimal exponent of the first digit).
    """
    digits = str(value)
    exponent = len(digits) - 1
    if len(digits) <= count:
        return digits.ljust(count, "0"), exponent

    kept = int(digits[:count])
    if digits[count] >= "5":
        kept += 1
    kept_text = str(kept)
    if len(kept_text) > count:
        # Carry rolled over into a new leading digit, e.g. 999 -> 1000
        kept_text = kept_text[:count]
        exponent += 1
    return kept_text, exponent


def _exponential(value: int, precision: int, letter: str, min_exponent_digits: int, trim: bool) -> str:
    if value == 0:
        mantissa, exponent = "0" * (precision + 1), 0
    else:
        mantissa, exponent = _round_significant(value, precision + 1)

    fraction = mantissa[1:]
    if trim:
        fraction = fraction.rstrip("0")

    text = mantissa[0]
    if fraction:
        text += DECIMAL_SEPARATOR + fraction
    sign = "+" if exponent >= 0 else "-"
    return f"{text}{letter}{sign}{abs(exponent):0{min_exponent_digits}d}"


def _scientific(value: int, integer_places: int, fraction_places: int, exponent_format: str) -> tuple[str, str, str]:
    """Split ``value`` into mantissa digits and exponent for a custom ``E+0`` pattern.

    The mantissa keeps one digit per integer placeholder, so ``00.0E+0``
    renders 1234 as ``12.3E+2``.

    Returns:
        Tuple of (integer digits, fraction digits, exponent text).
    """
    if not integer_places and not fraction_places:
        integer_places = 1
    count = integer_places + fraction_places

    if value == 0:
        significant, exponent = "0" * count, 0
    else:
        significant, exponent = _round_significant(value, count)
        exponent -= integer_places - 1

    letter = exponent_format[0]
    explicit_plus = exponent_format[1:2] == "+"
    width = len(exponent_format.lstrip("Ee+-"))
    sign = "-" if exponent < 0 else ("+" if explicit_plus else "")
    return significant[:integer_places], significant[integer_places:], f"{letter}{sign}{abs(exponent):0{width}d}"


def _format_standard(value: int, letter: str, precision: int | None) -> str:
    kind = letter.upper()

    if kind == "D":
        return str(value).zfill(precision or 0)

    if kind == "X":
        return format(value, "X" if letter == "X" else "x").zfill(precision or 0)

    if kind == "B":
        return format(value, "b").zfill(precision or 0)

    if kind == "F":
        return _with_decimals(str(value), 2 if precision is None else precision)

    if kind == "N":
        return _with_decimals(_group(str(value)), 2 if precision is None else precision)

    if kind == "C":
        return CURRENCY_SYMBOL + _with_decimals(_group(str(value)), 2 if precision is None else precision)

    if kind == "P":
        scaled = _group(str(value * 100))
        return _with_decimals(scaled, 2 if precision is None else precision) + " " + PERCENT_SYMBOL

    if kind == "E":
        return _exponential(value, 6 if precision is None else precision, letter, 3, trim=False)

    if kind == "G":
        digits = str(value)
        if not precision or len(digits) <= precision:
            return digits
        return _exponential(value, precision - 1, "E" if letter == "G" else "e", 2, trim=True)

    raise NumberFormatError(f"Unsupported standard numeric format '{letter}'")


def _split_sections(fmt: str) -> list[str]:
    """Split a custom format into its ``;``-separated sections."""
    sections = []
    current = []
    quote = None
    escaped = False
    for char in fmt:
        if escaped:
            current.append(char)
            escaped = False
        elif quote:
            current.append(char)
            if char == quote:
                quote = None
        elif char == "\\":
            current.append(char)
            escaped = True
        elif char in ("'", '"'):
            current.append(char)
            quote = char
        elif char == ";":
            sections.append("".join(current))
            current = []
        else:
            current.append(char)
    sections.append("".join(current))
    return sections


def _tokenize(section: str) -> list[tuple[str, str]]:
    """Break a custom format section into (kind, text) tokens.

    Kinds are ``digit`` (``0``/``#``), ``point``, ``comma``, ``percent``,
    ``permille``, ``exponent`` (``E+0``, ``e-00``, ``E0``...) and ``literal``.
    """
    tokens: list[tuple[str, str]] = []
    index = 0
    while index < len(section):
        char = section[index]
        if char in ("E", "e"):
            end = index + 1
            if end < len(section) and section[end] in ("+", "-"):
                end += 1
            zeros = len(section[end:]) - len(section[end:].lstrip("0"))
            if zeros:
                tokens.append(("exponent", section[index : end + zeros]))
                index = end + zeros
                continue
        if char in ("'", '"'):
            end = section.find(char, index + 1)
            if end == -1:
                raise NumberFormatError(f"Unterminated quoted string in format '{section}'")
            tokens.append(("literal", section[index + 1 : end]))
            index = end + 1
            continue
        if char == "\\":
            if index + 1 >= len(section):
                raise NumberFormatError(f"Format '{section}' ends with an escape character")
            tokens.append(("literal", section[index + 1]))
            index += 2
            continue

        if char in DIGIT_PLACEHOLDERS:
            tokens.append(("digit", char))
        elif char == ".":
            tokens.append(("point", char))
        elif char == ",":
            tokens.append(("comma", char))
        elif char == "%":
            tokens.append(("percent", PERCENT_SYMBOL))
        elif char == PER_MILLE_SYMBOL:
            tokens.append(("permille", PER_MILLE_SYMBOL))
        else:
            tokens.append(("literal", char))
        index += 1
    return tokens


def _format_custom(value: int, fmt: str) -> str:
    sections = _split_sections(fmt)
    section = sections[0]
    if value == 0 and len(sections) >= 3 and sections[2]:
        section = sections[2]

    tokens = _tokenize(section)

    # Only the first decimal point counts, later ones are dropped.
    point_index = next((i for i, (kind, _) in enumerate(tokens) if kind == "point"), len(tokens))
    integer_tokens = tokens[:point_index]
    fraction_tokens = [token for token in tokens[point_index + 1 :] if token[0] != "point"]

    integer_digits = [i for i, (kind, _) in enumerate(integer_tokens) if kind == "digit"]
    fraction_digits = [text for kind, text in fraction_tokens if kind == "digit"]

    grouping = False
    scale_commas = 0
    if integer_digits:
        first, last = integer_digits[0], integer_digits[-1]
        for i, (kind, _) in enumerate(integer_tokens):
            if kind != "comma":
                continue
            if first < i < last:
                grouping = True
            elif i > last:
                scale_commas += 1

    numerator = value
    for kind, _ in tokens:
        if kind == "percent":
            numerator *= 100
        elif kind == "permille":
            numerator *= 1000

    fraction_places = len(fraction_digits)
    placeholders = [integer_tokens[i][1] for i in integer_digits]
    exponent_format = next((text for kind, text in tokens if kind == "exponent"), None)
    exponent_text = ""

    if exponent_format is None:
        # Round half away from zero to the number of fractional placeholders.
        denominator = 1000**scale_commas
        quotient, remainder = divmod(numerator * 10**fraction_places, denominator)
        if remainder * 2 >= denominator:
            quotient += 1
        integer_part, fraction_part = divmod(quotient, 10**fraction_places)

        # Integer digits: a "0" placeholder forces every position to its right.
        first_zero = placeholders.index("0") if "0" in placeholders else len(placeholders)
        digits = (str(integer_part) if integer_part else "").zfill(len(placeholders) - first_zero)
        fraction_text = str(fraction_part).zfill(fraction_places) if fraction_places else ""
    else:
        # Scaling commas do not apply in scientific notation.
        digits, fraction_text, exponent_text = _scientific(
            numerator, len(placeholders), fraction_places, exponent_format
        )

    # Fraction digits: trailing "#" positions drop zeros, "0" positions keep them.
    last_zero = max((i for i, text in enumerate(fraction_digits) if text == "0"), default=-1)
    fraction_text = fraction_text.rstrip("0").ljust(last_zero + 1, "0")

    output = []
    slots = len(placeholders)
    emitted = 0
    slot = 0
    for kind, text in integer_tokens:
        if kind == "digit":
            # Slots are right-aligned; the leftmost slot absorbs any surplus digits.
            upto = max(len(digits) - (slots - 1 - slot), 0)
            for position in range(emitted, upto):
                output.append(digits[position])
                remaining = len(digits) - 1 - position
                if grouping and remaining > 0 and remaining % 3 == 0:
                    output.append(GROUP_SEPARATOR)
            emitted = upto
            slot += 1
        elif kind == "exponent":
            output.append(exponent_text)
        elif kind != "comma":
            output.append(text)

    # Without integer placeholders the integer digits sit just before the point.
    if not placeholders and fraction_places:
        output.append(digits)

    if point_index < len(tokens) and fraction_text:
        output.append(DECIMAL_SEPARATOR)

    slot = 0
    for kind, text in fraction_tokens:
        if kind == "digit":
            if slot < len(fraction_text):
                output.append(fraction_text[slot])
            slot += 1
        elif kind == "exponent":
            output.append(exponent_text)
        elif kind != "comma":
            output.append(text)

    return "".join(output)
