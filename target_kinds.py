#!/usr/bin/env python3
"""
Build profile and target kind selectors

A profile names a build configuration directory directly below a target
root (debug, release, doc). A kind names an artifact directory below a
profile (build, deps, examples, incremental). The ALL variant of either
axis means "no restriction" and maps to no sub-path.
"""

from enum import Enum
from typing import Optional


class Profile(Enum):
    DEBUG = "debug"
    RELEASE = "release"
    DOC = "doc"
    ALL = "all"

    def as_str(self) -> Optional[str]:
        """Return the directory name for this profile, or None for ALL"""
        if self is Profile.ALL:
            return None
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Profile":
        try:
            return _PROFILE_ALIASES[text]
        except KeyError:
            raise ValueError(f"unknown profile: '{text}'") from None


class TargetKind(Enum):
    BUILD = "build"
    DEPS = "deps"
    EXAMPLES = "examples"
    INCREMENTAL = "incremental"
    ALL = "all"

    def as_str(self) -> Optional[str]:
        """Return the directory name for this kind, or None for ALL"""
        if self is TargetKind.ALL:
            return None
        return self.value

    @classmethod
    def parse(cls, text: str) -> "TargetKind":
        try:
            return _KIND_ALIASES[text]
        except KeyError:
            raise ValueError(f"unknown target kind: '{text}'") from None


_PROFILE_ALIASES = {
    "d": Profile.DOC,
    "doc": Profile.DOC,
    "docs": Profile.DOC,
    "rel": Profile.RELEASE,
    "release": Profile.RELEASE,
    "dbg": Profile.DEBUG,
    "debug": Profile.DEBUG,
    "all": Profile.ALL,
}

_KIND_ALIASES = {
    "b": TargetKind.BUILD,
    "build": TargetKind.BUILD,
    "d": TargetKind.DEPS,
    "deps": TargetKind.DEPS,
    "ex": TargetKind.EXAMPLES,
    "examples": TargetKind.EXAMPLES,
    "inc": TargetKind.INCREMENTAL,
    "incremental": TargetKind.INCREMENTAL,
    "all": TargetKind.ALL,
}

# Catalog order, used when a listing has to spell out what ALL covers
PROFILE_NAMES: tuple[str, ...] = tuple(p.value for p in Profile if p is not Profile.ALL)
KIND_NAMES: tuple[str, ...] = tuple(k.value for k in TargetKind if k is not TargetKind.ALL)
