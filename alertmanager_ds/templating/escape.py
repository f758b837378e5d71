"""Matcher-safe formatting of template variable selections.

A selection ends up inside a quoted Alertmanager matcher, either compared
literally (``label="value"``) or spliced into a regex alternation
(``label=~"(a|b)"``). The two need different escaping, so the mode is chosen
explicitly from the variable's ``multi`` / ``include_all`` flags:

* literal: only backslash and single quote are neutralised;
* regex alternation: backslash plus every regex metacharacter
  ``$ ^ * { } [ ] ' + ? ( ) |`` are neutralised, and several values are
  joined into one ``(a|b|c)`` group.

Backslashes are doubled once more than a bare regex would need because the
value is URL-encoded into a quoted matcher which the backend unquotes first.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import StrEnum
from typing import Any

_REGEX_SPECIAL = re.compile(r"[$^*{}\[\]'+?()|]")


class EscapeMode(StrEnum):
    """How a selection is embedded in a matcher."""

    LITERAL = "literal"
    REGEX_ALTERNATION = "regex_alternation"


def select_escape_mode(multi: bool, include_all: bool) -> EscapeMode:
    """Literal only when the variable allows neither multiple values nor "All"."""
    if not multi and not include_all:
        return EscapeMode.LITERAL
    return EscapeMode.REGEX_ALTERNATION


def literal_escape(value: Any) -> Any:
    """Escape backslash, then single quote. Non-strings pass through."""
    if not isinstance(value, str):
        return value
    return value.replace("\\", "\\\\").replace("'", "\\\\'")


def regex_escape(value: Any) -> Any:
    """Escape backslash, then every regex metacharacter. Non-strings pass through."""
    if not isinstance(value, str):
        return value
    escaped = value.replace("\\", "\\\\\\\\")
    return _REGEX_SPECIAL.sub(lambda m: "\\\\" + m.group(0), escaped)


def interpolate_query_expr(
    value: Any = (),
    *,
    multi: bool = False,
    include_all: bool = False,
) -> Any:
    """Format a variable selection for embedding in a matcher expression.

    Args:
        value: A single string, a sequence of strings, or anything else
            (returned unchanged).
        multi: The variable accepts several values.
        include_all: The variable offers an "All" option.

    Returns:
        The escaped string. On the literal path a sequence is returned
        as-is, callers only send single values there.
    """
    if select_escape_mode(multi, include_all) is EscapeMode.LITERAL:
        return literal_escape(value)

    if isinstance(value, str):
        return regex_escape(value)
    if not isinstance(value, Sequence):
        return value

    escaped = [regex_escape(v) for v in value]
    if len(escaped) == 1:
        return escaped[0]
    return "(" + "|".join(str(v) for v in escaped) + ")"
