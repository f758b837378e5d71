"""Alert query → URL parameters for ``GET /api/v2/alerts``."""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import quote

from alertmanager_ds.core.types import AlertQuery, TemplateVariable
from alertmanager_ds.templating.variables import render_template

# Characters encodeURIComponent leaves alone besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def split_matchers(filters: str) -> list[str]:
    """Split a matcher list on commas outside double-quoted values.

    Accepts both ``a="x", b=~"y|z"`` and the braced ``{a="x", b=~"y|z"}``
    form. Blank pieces are dropped.

    Examples:
        'env="prod", team=~"a,b"' → ['env="prod"', 'team=~"a,b"']
    """
    text = filters.strip()
    if text.startswith("{") and text.endswith("}"):
        text = text[1:-1]

    pieces: list[str] = []
    current: list[str] = []
    in_quotes = False
    escaped = False
    for ch in text:
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == '"':
            in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            pieces.append("".join(current))
            current = []
            continue
        current.append(ch)
    pieces.append("".join(current))

    return [piece.strip() for piece in pieces if piece.strip()]


def build_alert_params(
    query: AlertQuery,
    variables: Iterable[TemplateVariable] = (),
) -> list[str]:
    """Build the ordered ``key=value`` parameter list for an alert query.

    Template variables in ``filters`` are substituted first, so each
    selection is escaped for the matcher it lands in.
    """
    params = [
        f"active={_flag(query.active)}",
        f"silenced={_flag(query.silenced)}",
        f"inhibited={_flag(query.inhibited)}",
        f"unprocessed={_flag(query.unprocessed)}",
    ]
    if query.receiver:
        params.append(f"receiver={encode_component(query.receiver)}")

    if query.filters:
        rendered = render_template(query.filters, variables)
        params.extend(f"filter={encode_component(m)}" for m in split_matchers(rendered))

    return params
