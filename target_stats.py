#!/usr/bin/env python3
"""
Aggregator

Recursively sums byte size, file count and subdirectory count for each
selected directory. Work is spread over a thread pool: every top-level
subdirectory of every selected directory is walked as its own unit, and
the partial records are added up per directory once all units finish.
"""

import functools
import os
import pathlib
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Optional

ErrorCallback = Callable[[pathlib.Path, OSError], None]


@dataclass(frozen=True, order=True)
class Record:
    """Aggregate statistics for one directory tree

    Ordering compares size first, then files, then directories.
    """

    size: int = 0
    files: int = 0
    directories: int = 0

    def __add__(self, other: "Record") -> "Record":
        if not isinstance(other, Record):
            return NotImplemented
        return Record(
            size=self.size + other.size,
            files=self.files + other.files,
            directories=self.directories + other.directories,
        )


def total_record(records: Iterable[Record]) -> Record:
    """Sum a sequence of records"""
    total = Record()
    for record in records:
        total = total + record
    return total


def _scan_level(path: pathlib.Path, on_error: Optional[ErrorCallback]) -> tuple[Record, list[pathlib.Path]]:
    """Count the files and subdirectories directly inside *path*

    Returns the record for this level and the subdirectories still to walk.
    Symlinks are neither followed nor counted.
    """
    size = files = directories = 0
    subdirs: list[pathlib.Path] = []

    try:
        with os.scandir(path) as entries:
            for entry in entries:
                try:
                    if entry.is_file(follow_symlinks=False):
                        size += entry.stat(follow_symlinks=False).st_size
                        files += 1
                    elif entry.is_dir(follow_symlinks=False):
                        directories += 1
                        subdirs.append(pathlib.Path(entry.path))
                except OSError as e:
                    if on_error:
                        on_error(pathlib.Path(entry.path), e)
    except OSError as e:
        if on_error:
            on_error(path, e)

    return Record(size, files, directories), subdirs


def _walk(path: pathlib.Path, on_error: Optional[ErrorCallback]) -> Record:
    """Sum everything below *path*, not counting *path* itself"""
    total = Record()
    stack = [path]
    while stack:
        record, subdirs = _scan_level(stack.pop(), on_error)
        total = total + record
        stack.extend(subdirs)
    return total


def sum_target(path: pathlib.Path, on_error: Optional[ErrorCallback] = None) -> Record:
    """Compute the Record for a single directory tree

    The directory itself is not counted in ``directories``; every
    subdirectory below it is. Entries that cannot be read are skipped
    (reported through *on_error* when given).
    """
    return _walk(pathlib.Path(path), on_error)


def sum_targets(
    paths: Iterable[pathlib.Path],
    max_workers: Optional[int] = None,
    on_error: Optional[ErrorCallback] = None,
) -> list[tuple[pathlib.Path, Record]]:
    """Compute Records for many directories in parallel

    Args:
        paths: Directories to measure; repeated paths are measured once
        max_workers: Thread pool size (None uses the executor default)
        on_error: Called with (path, error) for skipped entries, possibly
            from worker threads

    Returns:
        (path, Record) pairs in order of first occurrence
    """
    unique = list(dict.fromkeys(pathlib.Path(p) for p in paths))
    if not unique:
        return []

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        levels = list(pool.map(functools.partial(_scan_level, on_error=on_error), unique))

        # One unit per top-level subdirectory; owners holds each unit's directory index
        owners = [index for index, (_record, subdirs) in enumerate(levels) for _subdir in subdirs]
        units = [subdir for _record, subdirs in levels for subdir in subdirs]
        partials = pool.map(functools.partial(_walk, on_error=on_error), units)

        totals = [record for record, _subdirs in levels]
        for index, record in zip(owners, partials):
            totals[index] = totals[index] + record

    return list(zip(unique, totals))
