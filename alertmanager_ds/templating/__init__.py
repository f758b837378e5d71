"""Template variable interpolation and matcher escaping."""

from alertmanager_ds.templating.escape import (
    EscapeMode,
    interpolate_query_expr,
    literal_escape,
    regex_escape,
    select_escape_mode,
)
from alertmanager_ds.templating.variables import format_variable, render_template

__all__ = [
    "EscapeMode",
    "format_variable",
    "interpolate_query_expr",
    "literal_escape",
    "regex_escape",
    "render_template",
    "select_escape_mode",
]
