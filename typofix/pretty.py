# Copyright 2026, typofix developers
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Pretty-print lists of dicts as tables"""
from __future__ import annotations

from typing import Any, Collection, Iterator, Mapping, TextIO

import json
import sys

ResultType = Collection[Mapping[str, Any]]
TableLayout = Collection[str]


def format_item(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(format_item(entry) for entry in value)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "yes" if value else "no"
    if value is None:
        return ""
    # if adding quotes is the only thing json encoding would do, omit them
    json_v = json.dumps(value, sort_keys=True, default=str)
    if json_v == '"{}"'.format(value):
        return "{}".format(value)
    return json_v


def yield_table(
    result: ResultType,
    table_layout: TableLayout | None = None,
    header: bool = True,
) -> Iterator[str]:
    """
    format a list of dicts in a table yielding string rows

    :param list result: List of dicts to be printed.
    :param list table_layout: Columns to be printed, e.g. ["word", "correction"].
        Defaults to every field seen, sorted by name.
    :param bool header: True to print the field names
    """
    widths: dict[str, int] = {}
    formatted_values: list[dict[str, str]] = []
    for item in result:
        formatted_row = {}
        for key, value in item.items():
            if table_layout is not None and key not in table_layout:
                continue
            formatted_row[key] = format_item(value)
            widths[key] = max(len(key), len(formatted_row[key]), widths.get(key, 1))
        formatted_values.append(formatted_row)

    columns = list(table_layout) if table_layout is not None else sorted(widths)
    for column in columns:
        widths.setdefault(column, len(column))

    if header:
        yield "  ".join(column.upper().ljust(widths[column]) for column in columns)
        yield "  ".join("=" * widths[column] for column in columns)
    for formatted_row in formatted_values:
        yield "  ".join(formatted_row.get(column, "").ljust(widths[column]) for column in columns).strip()


def print_table(
    result: ResultType | None,
    table_layout: TableLayout | None = None,
    header: bool = True,
    file: TextIO | None = None,
) -> None:
    """print a list of dicts in a nicer table format"""
    if not result:
        return
    for row in yield_table(result, table_layout=table_layout, header=header):
        print(row, file=file or sys.stdout)
