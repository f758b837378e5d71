"""Template variable substitution for filter expressions."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

import structlog

from alertmanager_ds.core.types import TemplateVariable
from alertmanager_ds.templating.escape import interpolate_query_expr

logger = structlog.stdlib.get_logger()

# $name | ${name} | [[name]]
_VARIABLE_PATTERN = re.compile(r"\$\{(\w+)\}|\[\[(\w+)\]\]|\$(\w+)")


def format_variable(variable: TemplateVariable) -> str:
    """Return the matcher-safe text for a variable's current selection.

    When "All" is selected, a custom ``all_value`` is inserted verbatim,
    otherwise every option becomes part of the selection.
    """
    if variable.all_selected:
        if variable.all_value is not None:
            return variable.all_value
        selection: Any = list(variable.options)
    else:
        selection = variable.current

    formatted = interpolate_query_expr(
        selection,
        multi=variable.multi,
        include_all=variable.include_all,
    )
    if isinstance(formatted, str):
        return formatted

    # Single-value variables should never hold a list; keep the values but
    # flag it, they were not escaped.
    logger.warning(
        "template_variable_unescaped_list",
        variable=variable.name,
        values=len(formatted),
    )
    return ",".join(str(v) for v in formatted)


def render_template(text: str, variables: Iterable[TemplateVariable]) -> str:
    """Replace ``$name``, ``${name}`` and ``[[name]]`` references in *text*.

    References to unknown variables are left untouched.
    """
    by_name = {var.name: var for var in variables}
    if not by_name or not text:
        return text

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1) or match.group(2) or match.group(3)
        variable = by_name.get(name)
        if variable is None:
            return match.group(0)
        return format_variable(variable)

    return _VARIABLE_PATTERN.sub(_replace, text)
