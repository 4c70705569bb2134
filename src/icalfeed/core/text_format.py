"""iCalendar text and datetime value formatting.

See section 4.1 of RFC 2445 for the escaping and folding rules.
"""

import re
import textwrap
from typing import Any, List

from icalfeed.config.constants import ICS_DATETIME_FORMAT, ICS_FOLD, ICS_WRAP_WIDTH
from icalfeed.core.timezone_utils import Instant, to_utc

_SPECIAL_CHARS = re.compile(r"([,;])")
_BLANK_LINES = re.compile(r"\n{2,}")

_wrapper = textwrap.TextWrapper(
    width=ICS_WRAP_WIDTH,
    expand_tabs=False,
    replace_whitespace=False,
    break_long_words=False,
    break_on_hyphens=False,
)


def escape_text(value: str) -> str:
    """Escape the three special characters (backslash, comma, semicolon).

    Backslashes are doubled first so the escapes added for commas and
    semicolons are not escaped again. The transform is one-way: escaping
    already escaped text escapes it a second time.
    """
    value = value.replace("\\", "\\\\")
    return _SPECIAL_CHARS.sub(r"\\\1", value)


def wrap_lines(value: str, width: int = ICS_WRAP_WIDTH) -> List[str]:
    """Word-wrap each line of ``value`` at ``width`` characters.

    Lines only break at whitespace; a single word longer than ``width`` is
    kept whole. Lines that already fit are left untouched.

    Args:
        value: Newline separated text.
        width: Maximum line length.

    Returns:
        The wrapped lines.
    """
    wrapper = _wrapper if width == ICS_WRAP_WIDTH else textwrap.TextWrapper(
        width=width,
        expand_tabs=False,
        replace_whitespace=False,
        break_long_words=False,
        break_on_hyphens=False,
    )
    lines: List[str] = []
    for line in value.split("\n"):
        if len(line) <= width:
            lines.append(line)
        else:
            lines.extend(wrapper.wrap(line) or [""])
    return lines


def format_text(value: Any) -> str:
    """Format a free-text property value.

    Escapes special characters, keeps literal ``\\n`` sequences as line
    breaks, collapses blank lines, word-wraps at 74 characters and folds
    every line break into CRLF plus a space.

    Args:
        value: The raw field value; None is treated as empty.

    Returns:
        The property value ready to follow ``NAME:`` on a content line.
    """
    if value is None:
        return ""
    string = escape_text(str(value))

    # A literal backslash-n in the input is kept as the \n escape; the real
    # newline after it stops word-wrapping from eating the next leading space
    string = string.replace("\\\\n", "\\n\n")

    string = string.replace("\r\n", "\n")
    string = _BLANK_LINES.sub("\n", string)

    return ICS_FOLD.join(wrap_lines(string))


def format_datetime(value: Instant) -> str:
    """Format an instant as an iCalendar UTC datetime (YYYYMMDDTHHMMSSZ)."""
    return ICS_DATETIME_FORMAT.format(to_utc(value))
