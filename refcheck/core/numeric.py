"""Numeric classifier used by the checksum engine.

Decides, per position, whether a character contributes its digit value or
goes through the format's alpha conversion. The convention is fixed and
locale independent: ASCII digits, `.` decimal point, `,` thousands
separator, optional sign (leading or trailing), optional parentheses for
negatives, optional `$` and an optional exponent.
"""

from __future__ import annotations

import re

_ASCII_WHITESPACE = " \t\n\r\f\v"

_NUMBER = re.compile(
    r"""
    (?P<open>\()?
    \$?\s*[+-]?\s*\$?
    (?:\d[\d,]*(?:\.\d*)?|\.\d+)
    (?:[eE][+-]?\d+)?
    \s*[+-]?\s*\$?
    (?(open)\))
    """,
    re.VERBOSE | re.ASCII,
)


def is_numeric(text: str) -> bool:
    """True if `text` parses as a base-10 number.

    A single character is numeric exactly when it is one of 0-9.
    """
    stripped = text.strip(_ASCII_WHITESPACE)
    if not stripped:
        return False
    return _NUMBER.fullmatch(stripped) is not None
