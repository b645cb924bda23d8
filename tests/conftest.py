"""Pytest bootstrap for local module imports and tree fixtures.

Kenosis is a set of top-level modules; make sure they import from the
repository root regardless of how pytest is launched.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PROJECT_ROOT_STR = str(PROJECT_ROOT)

if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)


def build_tree(root: Path, layout: dict) -> Path:
    """Create directories and files under *root*.

    Keys ending in "/" are directories; other keys are files whose value is
    either a byte count or bytes content.
    """
    for name, value in layout.items():
        if name.endswith("/"):
            directory = root / name.rstrip("/")
            directory.mkdir(parents=True, exist_ok=True)
            if value:
                build_tree(directory, value)
        else:
            path = root / name
            path.parent.mkdir(parents=True, exist_ok=True)
            data = value if isinstance(value, bytes) else b"x" * value
            path.write_bytes(data)
    return root


@pytest.fixture
def make_tree(tmp_path):
    def _make(layout: dict) -> Path:
        return build_tree(tmp_path, layout)

    return _make


@pytest.fixture
def cargo_workspace(make_tree):
    """Two projects with typical cargo target layouts plus a nested target."""
    return make_tree(
        {
            "proj/": {
                "Cargo.toml": 10,
                "src/": {"main.rs": 20},
                "target/": {
                    "debug/": {
                        "deps/": {"libfoo.rlib": 1000, "foo.d": 24},
                        "build/": {"foo-123/": {"output": 100}},
                        "incremental/": {"foo-abc/": {"s-1/": {"dep-graph.bin": 300}}},
                    },
                    "doc/": {"foo/": {"index.html": 500}},
                },
            },
            "other/": {
                "nested/": {
                    "target/": {
                        "release/": {"deps/": {"libbar.rlib": 4000}},
                        # Vendored target inside a target must never be reported
                        "vendor/": {"target/": {"junk": 5}},
                    },
                },
            },
        }
    )
