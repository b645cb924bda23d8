#!/usr/bin/env python3
"""
Target Locator

Finds build output directories (named "target") below a root
directory. A matched directory is a leaf for the search: nothing inside it
is examined, so dependency trees vendored inside a target are never
reported twice.
"""

import os
import pathlib
from collections.abc import Iterable
from typing import Callable, Optional

from target_kinds import TargetKind

ErrorCallback = Callable[[pathlib.Path, OSError], None]

TARGET_NAME = "target"


def _subdirectories(path: pathlib.Path) -> list[os.DirEntry]:
    """Return real (non-symlink) subdirectories of *path*, sorted by name.

    Raises OSError if *path* itself cannot be read.
    """
    with os.scandir(path) as entries:
        dirs = []
        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    dirs.append(entry)
            except OSError:
                continue
    dirs.sort(key=lambda e: e.name)
    return dirs


def find_targets(
    root: pathlib.Path,
    on_error: Optional[ErrorCallback] = None,
) -> list[pathlib.Path]:
    """Find every directory named "target" below *root*, depth first

    Args:
        root: Directory to search
        on_error: Called with (path, error) for each subdirectory that
            could not be read; such directories are skipped

    Returns:
        Target roots in depth-first, name-sorted order. If *root* is itself
        named "target" it is returned alone without scanning.

    Raises:
        OSError: if *root* itself cannot be read
    """
    root = pathlib.Path(root)
    if root.name == TARGET_NAME:
        return [root]

    found: list[pathlib.Path] = []
    # Stack of pending subdirectories, reversed so they pop in sorted order
    stack = [pathlib.Path(e.path) for e in reversed(_subdirectories(root))]

    while stack:
        current = stack.pop()
        if current.name == TARGET_NAME:
            found.append(current)
            continue

        try:
            children = _subdirectories(current)
        except OSError as e:
            if on_error:
                on_error(current, e)
            continue

        stack.extend(pathlib.Path(e.path) for e in reversed(children))

    return found


def find_target_kinds(
    root: pathlib.Path,
    kinds: Iterable[TargetKind],
    on_error: Optional[ErrorCallback] = None,
) -> list[pathlib.Path]:
    """Find target roots and narrow each one to its matching kind directories

    For every target root found by find_targets, only the immediate
    subdirectories whose name matches one of *kinds* are returned. When no
    kind filter is given (empty, or containing TargetKind.ALL) the target
    roots are returned whole.
    """
    kinds = list(kinds)
    targets = find_targets(root, on_error=on_error)
    if not kinds or TargetKind.ALL in kinds:
        return targets

    wanted = {k.as_str() for k in kinds}
    matches: list[pathlib.Path] = []
    for target in targets:
        try:
            children = _subdirectories(target)
        except OSError as e:
            if on_error:
                on_error(target, e)
            continue
        matches.extend(pathlib.Path(e.path) for e in children if e.name in wanted)

    return matches
