"""
Permissive numeric conversions for NAS option values.

Both conversions stop at the first character they cannot use and never raise:
a string with no usable leading characters converts to 0. Option values are
supplied by operators at process start, so a malformed value degrades to 0
rather than aborting the parse.
"""

import re

_DECIMAL_PREFIX = re.compile(r"\s*([+-]?\d+)", re.ASCII)

_HEX_DIGIT_VALUES: dict[str, int] = {
    **{digit: int(digit) for digit in "0123456789"},
    **{letter: 10 + offset for offset, letter in enumerate("abcdef")},
    **{letter: 10 + offset for offset, letter in enumerate("ABCDEF")},
}


def parse_hex(value: str) -> int:
    """
    Convert the leading hexadecimal digits of a string to an integer.

    Scans characters while they are hex digits (``0-9``, ``A-F``, ``a-f``) and
    accumulates ``result * 16 + digit``. Scanning stops at the first other
    character. A ``0x`` prefix is not recognized: ``"0x1f"`` converts to 0
    because scanning stops at ``x``.

    :param value: String holding a hexadecimal mask such as ``"f0"``
    :type value: str
    :return: Integer value of the leading hex digits, 0 if there are none
    :rtype: int

    Example:
        >>> parse_hex("f0")
        240
        >>> parse_hex("1g")
        1
    """
    result = 0
    for character in value:
        digit = _HEX_DIGIT_VALUES.get(character)
        if digit is None:
            break
        result = result * 16 + digit
    return result


def parse_decimal(value: str) -> int:
    """
    Convert the leading decimal digits of a string to an integer.

    Leading whitespace and a single sign character are accepted before the
    digits. Anything after the digits is ignored. Only ASCII whitespace and
    the digits ``0-9`` are recognized.

    :param value: String holding a decimal number such as ``"123"``
    :type value: str
    :return: Integer value of the leading digits, 0 if there are none
    :rtype: int
    """
    match = _DECIMAL_PREFIX.match(value)
    if match is None:
        return 0
    return int(match.group(1))
