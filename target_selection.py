#!/usr/bin/env python3
"""
Selector Set

Collects the (profile, kind) combinations requested on the command line
and resolves them against discovered target roots into the concrete
directories to measure or sweep.
"""

import pathlib
from collections.abc import Iterable

from target_kinds import KIND_NAMES, PROFILE_NAMES, Profile, TargetKind


class SelectorSet:
    """Profile -> kinds mapping, resolved into existing directories"""

    def __init__(self):
        self._selections: dict[Profile, list[TargetKind]] = {}

    @classmethod
    def from_options(cls, profiles: Iterable[Profile], kinds: Iterable[TargetKind]) -> "SelectorSet":
        """Build the cross product of profiles x kinds; an empty axis means ALL"""
        profiles = list(profiles) or [Profile.ALL]
        kinds = list(kinds) or [TargetKind.ALL]

        selectors = cls()
        for profile in profiles:
            for kind in kinds:
                selectors.add(profile, kind)
        return selectors

    def add(self, profile: Profile, kind: TargetKind):
        self._selections.setdefault(profile, []).append(kind)

    def __len__(self) -> int:
        return sum(len(kinds) for kinds in self._selections.values())

    def __bool__(self) -> bool:
        return bool(self._selections)

    def candidates(self, target_root: pathlib.Path) -> list[pathlib.Path]:
        """Return the candidate paths for one target root, existing or not"""
        out = []
        for profile, kinds in self._selections.items():
            base = target_root
            if profile.as_str() is not None:
                base = base / profile.as_str()

            for kind in kinds:
                path = base
                if kind.as_str() is not None:
                    path = path / kind.as_str()
                out.append(path)
        return out

    def resolve(self, target_roots: Iterable[pathlib.Path]) -> list[pathlib.Path]:
        """Resolve selections against target roots

        Candidates that do not exist as directories are dropped; not every
        profile/kind combination exists in every project. The result holds
        each path once, in order of first occurrence, and never holds a
        path together with one of its ancestors: the ancestor wins.
        """
        resolved: dict[pathlib.Path, None] = {}
        for root in target_roots:
            for path in self.candidates(pathlib.Path(root)):
                if path in resolved or any(parent in resolved for parent in path.parents):
                    continue
                if not path.is_dir():
                    continue
                for nested in [p for p in resolved if path in p.parents]:
                    del resolved[nested]
                resolved[path] = None
        return list(resolved)

    def __str__(self) -> str:
        if not self._selections:
            profiles, kinds = sorted(PROFILE_NAMES), sorted(KIND_NAMES)
        else:
            profile_set: set[str] = set()
            kind_set: set[str] = set()
            for profile, selected_kinds in self._selections.items():
                if profile.as_str() is None:
                    profile_set.update(PROFILE_NAMES)
                else:
                    profile_set.add(profile.as_str())

                for kind in selected_kinds:
                    if kind.as_str() is None:
                        kind_set.update(KIND_NAMES)
                    else:
                        kind_set.add(kind.as_str())
            profiles, kinds = sorted(profile_set), sorted(kind_set)

        lines = []
        for profile in profiles:
            lines.append(profile)
            lines.extend(f"- {kind}" for kind in kinds)
        return "\n".join(lines)
