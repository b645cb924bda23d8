#!/usr/bin/env python3
"""
Sweeper

Recursive removal of resolved target directories. Each removal is
independent: a failure is recorded and the remaining directories are
still removed.
"""

import pathlib
import shutil
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass
class OperationResult:
    """Result of removing one directory tree"""

    path: pathlib.Path
    success: bool
    error_message: Optional[str] = None


class FileOperations:
    """Parallel directory tree removal"""

    def __init__(
        self,
        max_workers: Optional[int] = None,
        progress_callback: Optional[Callable[[OperationResult], None]] = None,
    ):
        """Initialize with worker count and optional per-result callback

        The callback runs on worker threads as each removal finishes.
        """
        self.max_workers = max_workers
        self.progress_callback = progress_callback

    def remove_tree(self, path: pathlib.Path) -> OperationResult:
        """Remove a single directory tree"""
        try:
            shutil.rmtree(path)
            result = OperationResult(path=path, success=True)
        except OSError as e:
            result = OperationResult(path=path, success=False, error_message=str(e))

        if self.progress_callback:
            self.progress_callback(result)
        return result

    def remove_trees(
        self, paths: Iterable[pathlib.Path]
    ) -> tuple[list[OperationResult], list[OperationResult]]:
        """Remove many directory trees concurrently and return success/failure lists

        Both lists keep the input order.
        """
        paths = [pathlib.Path(p) for p in paths]
        if not paths:
            return [], []

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            results = list(pool.map(self.remove_tree, paths))

        successful = [r for r in results if r.success]
        failed = [r for r in results if not r.success]
        return successful, failed
