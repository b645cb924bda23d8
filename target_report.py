#!/usr/bin/env python3
"""
Reporter

Renders per-directory statistics and grand totals as plain text blocks.
"""

import pathlib
from collections.abc import Iterable, Sequence

from auxiliary import commaize, fix_display_path, humanize
from console_ui import ConsoleUI
from target_stats import Record, total_record

SEPARATOR = "-" * 30

Entry = tuple[pathlib.Path, Record]


def sort_by_record(entries: Iterable[Entry]) -> list[Entry]:
    """Return entries ordered largest first (size, then files, then dirs)"""
    return sorted(entries, key=lambda entry: entry[1], reverse=True)


def _stat_lines(record: Record) -> list[str]:
    return [
        f"{'size':>5}: {humanize(record.size):>10}",
        f"{'files':>5}: {commaize(record.files):>10}",
        f"{'dirs':>5}: {commaize(record.directories):>10}",
    ]


def format_entry(path: pathlib.Path, record: Record) -> list[str]:
    return [fix_display_path(path), *_stat_lines(record)]


def format_totals(entries: Sequence[Entry], count: int) -> list[str]:
    total = total_record(record for _path, record in entries)
    return [SEPARATOR, f"in {count} top-level directories:", *_stat_lines(total)]


def print_stats(ui: ConsoleUI, entries: Sequence[Entry], count: int):
    """Print one block per entry followed by the totals"""
    for path, record in entries:
        for line in format_entry(path, record):
            ui.print_plain(line)

    for line in format_totals(entries, count):
        ui.print_plain(line)
