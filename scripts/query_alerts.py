#!/usr/bin/env python3
"""Alert query CLI: fetch alerts from Alertmanager and print them as a table.

Usage::

    # All active alerts
    python scripts/query_alerts.py

    # Filter with matchers, substituting a multi-value variable
    python scripts/query_alerts.py --filter 'env=~"$env", severity="critical"' \\
        --var env=prod,staging

    # Include silenced and inhibited alerts, JSON output
    python scripts/query_alerts.py --silenced --inhibited --json

    # Connection test only
    python scripts/query_alerts.py --test
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from alertmanager_ds.core.config import load_settings
from alertmanager_ds.core.logging import setup_logging
from alertmanager_ds.core.types import AlertQuery, AlertTable, TemplateVariable
from alertmanager_ds.datasource.client import AlertmanagerDatasource
from alertmanager_ds.datasource.exceptions import DatasourceError

_MAX_CELL_WIDTH = 40


def parse_variable(spec: str) -> TemplateVariable:
    """Parse ``name=value`` or ``name=v1,v2`` into a TemplateVariable.

    More than one value makes the variable multi-valued.
    """
    name, sep, raw = spec.partition("=")
    if not sep or not name.strip():
        raise ValueError(f"Invalid variable (expected name=value): {spec}")
    values = [v.strip() for v in raw.split(",") if v.strip()]
    if len(values) > 1:
        return TemplateVariable(name=name.strip(), current=values, multi=True)
    return TemplateVariable(name=name.strip(), current=values[0] if values else "")


def render_table(table: AlertTable) -> str:
    """Render an alert table as fixed-width ASCII."""
    names = table.column_names
    cells = [[str(v)[:_MAX_CELL_WIDTH] for v in row] for row in table.rows]
    widths = [len(n) for n in names]
    for row in cells:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    header = "  ".join(n.ljust(w) for n, w in zip(names, widths))
    lines = [header, "-" * len(header)]
    for row in cells:
        lines.append("  ".join(c.ljust(w) for c, w in zip(row, widths)))
    return "\n".join(lines)


async def run_query(args: argparse.Namespace) -> int:
    """Execute one alert query (or connection test) and print the result."""
    settings = load_settings(args.config)
    setup_logging(level="WARNING")

    try:
        variables = [parse_variable(v) for v in args.var]
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    async with AlertmanagerDatasource(settings.alertmanager) as ds:
        if args.test:
            status = await ds.test_datasource()
            print(f"{status.title}: {status.message}")
            return 0 if status.ok else 1

        query = AlertQuery(
            ref_id="A",
            active=args.active,
            silenced=args.silenced,
            inhibited=args.inhibited,
            receiver=args.receiver or "",
            filters=args.filter or "",
        )
        try:
            (table,) = await ds.query([query], variables)
        except DatasourceError as exc:
            print(f"Query failed: {exc}", file=sys.stderr)
            return 1

    if args.json:
        print(json.dumps(table.to_dict(), indent=2))
    elif table.empty:
        print("No alerts.", file=sys.stderr)
    else:
        print(render_table(table))
        print(f"\n{len(table.rows)} alerts")

    return 0


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Query Alertmanager alerts as a table.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML (default: config/settings.yaml)",
    )
    parser.add_argument(
        "--filter",
        default=None,
        help='Comma-separated matchers, e.g. \'alertname="Foo", env=~"$env"\'',
    )
    parser.add_argument("--receiver", default=None, help="Receiver name regex")
    parser.add_argument(
        "--active",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Include active alerts (default: yes)",
    )
    parser.add_argument("--silenced", action="store_true", help="Include silenced alerts")
    parser.add_argument("--inhibited", action="store_true", help="Include inhibited alerts")
    parser.add_argument(
        "--var",
        action="append",
        default=[],
        help="Template variable as name=value or name=v1,v2 (repeatable)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output raw JSON instead of table",
    )
    parser.add_argument(
        "--test",
        action="store_true",
        help="Only test the connection to Alertmanager",
    )
    args = parser.parse_args()

    code = asyncio.run(run_query(args))
    sys.exit(code)


if __name__ == "__main__":
    main()
