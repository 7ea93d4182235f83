"""Output formatting for CLI results."""

from __future__ import annotations

import json
import sys
from enum import Enum
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console(stderr=True)


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"
    TEXT = "text"


def print_output(
    record: Any,
    fmt: OutputFormat = OutputFormat.TABLE,
    title: str | None = None,
) -> None:
    """Print a decoded token record in the requested format.

    Args:
        record: An ``OAuthToken`` or ``ValidatedToken``.
        fmt: Output format (table, json, text).
        title: Optional title for table output.
    """
    if fmt == OutputFormat.JSON:
        print_json(record.model_dump(mode="json"))
    elif fmt == OutputFormat.TEXT:
        sys.stdout.write(str(record))
    else:
        print_table(record.as_row(), title)


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout."""
    json.dump(data, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")


def print_table(row: dict[str, Any], title: str | None = None) -> None:
    """Print a single record as a two-column Rich table."""
    table = Table(title=title, show_lines=False)
    table.add_column("field")
    table.add_column("value", overflow="fold")

    for key, value in row.items():
        table.add_row(key, str(value))

    console.print(table)
