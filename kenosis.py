#!/usr/bin/env python3
"""
Kenosis — Ancient Greek κένωσις (emptying)

Reclaims disk space taken by build output directories. Kenosis searches a
directory tree for "target" directories, narrows them to the requested
build profiles and artifact kinds, reports how much space each one uses,
and optionally sweeps them away.

Usage:
    kenosis [path]                          # Report every target below path
    kenosis -p debug -k deps                # Only target/debug/deps
    kenosis -p rel -p dbg -k inc            # Incremental caches of both profiles
    kenosis --sweep                         # Delete what was found
    kenosis --sweep --stats                 # Report, then delete
"""

import argparse
import pathlib
import sys
from typing import Optional

from auxiliary import fix_display_path
from console_ui import ConsoleUI
from file_operations import FileOperations, OperationResult
from kenosis_config import KenosisConfig
from target_kinds import Profile, TargetKind
from target_locator import find_targets
from target_report import print_stats, sort_by_record
from target_selection import SelectorSet
from target_stats import Record, sum_targets


def _describe(error: OSError) -> str:
    return error.strerror or str(error)


# ---------------------------------------------------------------------------
# Kenosis
# ---------------------------------------------------------------------------


class Kenosis:
    """Main application class for the Kenosis target sweeper"""

    def __init__(
        self, args: argparse.Namespace, config: Optional[KenosisConfig] = None, ui: Optional[ConsoleUI] = None
    ):
        self.args = args
        self.config = config or KenosisConfig.default()
        self.ui = ui or ConsoleUI()
        self.selectors = SelectorSet.from_options(args.profiles or [], args.kinds or [])

    # -- error reporting -----------------------------------------------------

    def _on_error(self, path: pathlib.Path, error: OSError):
        self.ui.print_warning(f"skipped: {fix_display_path(path)} ({_describe(error)})")

    @property
    def error_callback(self):
        return self._on_error if self.config.verbose else None

    # -- root validation -----------------------------------------------------

    def resolve_root(self) -> Optional[pathlib.Path]:
        """Return the canonical root directory, or None after printing why it is unusable"""
        directory = self.args.directory or self.args.path or "."
        try:
            root = pathlib.Path(directory).resolve(strict=True)
        except FileNotFoundError:
            self.ui.print_error(f"cannot find directory: `{directory}`")
            return None
        except OSError as e:
            self.ui.print_error(f"cannot access directory: `{directory}` ({_describe(e)})")
            return None

        if not root.is_dir():
            self.ui.print_error(f"invalid directory: `{fix_display_path(root)}`")
            return None
        return root

    # -- scanning ------------------------------------------------------------

    def scan(self, root: pathlib.Path) -> list[tuple[pathlib.Path, Record]]:
        """Locate targets, resolve selections and sum each resolved directory

        Raises:
            OSError: if the root directory cannot be read
        """
        with self.ui.activity(f"Searching {fix_display_path(root)}..."):
            targets = find_targets(root, on_error=self.error_callback)
            paths = self.selectors.resolve(targets)

        with self.ui.activity(f"Measuring {len(paths)} directories..."):
            return sum_targets(paths, max_workers=self.config.max_workers, on_error=self.error_callback)

    # -- reporting -----------------------------------------------------------

    def report(self, sums: list[tuple[pathlib.Path, Record]]):
        ordered = sort_by_record(sums)
        print_stats(self.ui, ordered, len(ordered))

    # -- sweeping ------------------------------------------------------------

    def _print_removal(self, result: OperationResult):
        if result.success:
            self.ui.print_success(f"removed: {fix_display_path(result.path)}")
        else:
            self.ui.print_error(f"could not remove: {fix_display_path(result.path)} because {result.error_message}")

    def sweep(self, sums: list[tuple[pathlib.Path, Record]]) -> tuple[list[OperationResult], list[OperationResult]]:
        operations = FileOperations(max_workers=self.config.max_workers, progress_callback=self._print_removal)
        return operations.remove_trees(path for path, _record in sums)

    # -- main entry point ----------------------------------------------------

    def run(self) -> int:
        root = self.resolve_root()
        if root is None:
            return 1

        self.ui.print_header("Kenosis", f"Sweeping build output under {fix_display_path(root)}")
        self.ui.print_plain(f"looking recursively under `{fix_display_path(root)}` for:")
        self.ui.print_plain(str(self.selectors))

        try:
            sums = self.scan(root)
        except OSError as e:
            self.ui.print_error(f"cannot read directory: `{fix_display_path(root)}` ({_describe(e)})")
            return 1

        if self.args.stats or not self.args.sweep:
            self.report(sums)

        if self.args.sweep:
            self.sweep(sums)

        return 0


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def _profile_arg(text: str) -> Profile:
    try:
        return Profile.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _kind_arg(text: str) -> TargetKind:
    try:
        return TargetKind.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _jobs_arg(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid job count: '{text}'") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"job count must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kenosis",
        description="Kenosis — find, measure and sweep build target directories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Profiles: debug (dbg), release (rel), doc (d, docs), all
Kinds:    build (b), deps (d), examples (ex), incremental (inc), all

Examples:
  kenosis ~/dev                       # report every target directory
  kenosis -p debug -k deps ~/dev      # only target/debug/deps
  kenosis -p rel -k inc --sweep       # delete release incremental caches
        """,
    )
    parser.add_argument("path", nargs="?", help="Root directory to search (default: current directory)")
    parser.add_argument("-d", "--directory", help="Root directory to search (overrides path)")
    parser.add_argument(
        "-p", "--profile", dest="profiles", action="append", type=_profile_arg, default=[], help="Profile type"
    )
    parser.add_argument(
        "-k", "--kind", dest="kinds", action="append", type=_kind_arg, default=[], help="Target kind"
    )
    parser.add_argument(
        "-s", "--stats", action="store_true", help="Print directory statistics (default unless sweeping)"
    )
    parser.add_argument("--sweep", action="store_true", help="Delete all matching directories")
    parser.add_argument("-j", "--jobs", type=_jobs_arg, default=None, help="Number of worker threads")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Report entries skipped because they could not be read"
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)
    app = Kenosis(args, KenosisConfig.from_args(args), ConsoleUI())
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
