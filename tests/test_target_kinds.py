"""Tests for profile and target kind parsing."""

import pytest

from target_kinds import KIND_NAMES, PROFILE_NAMES, Profile, TargetKind


@pytest.mark.parametrize(
    "text, expected",
    [
        ("d", Profile.DOC),
        ("doc", Profile.DOC),
        ("docs", Profile.DOC),
        ("rel", Profile.RELEASE),
        ("release", Profile.RELEASE),
        ("dbg", Profile.DEBUG),
        ("debug", Profile.DEBUG),
        ("all", Profile.ALL),
    ],
)
def test_profile_aliases(text, expected):
    assert Profile.parse(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("b", TargetKind.BUILD),
        ("build", TargetKind.BUILD),
        ("d", TargetKind.DEPS),
        ("deps", TargetKind.DEPS),
        ("ex", TargetKind.EXAMPLES),
        ("examples", TargetKind.EXAMPLES),
        ("inc", TargetKind.INCREMENTAL),
        ("incremental", TargetKind.INCREMENTAL),
        ("all", TargetKind.ALL),
    ],
)
def test_kind_aliases(text, expected):
    assert TargetKind.parse(text) is expected


def test_unknown_values_are_rejected():
    with pytest.raises(ValueError, match="unknown profile: 'fast'"):
        Profile.parse("fast")
    with pytest.raises(ValueError, match="unknown target kind: 'Deps'"):
        TargetKind.parse("Deps")


def test_all_maps_to_no_sub_path():
    assert Profile.ALL.as_str() is None
    assert TargetKind.ALL.as_str() is None
    assert Profile.RELEASE.as_str() == "release"
    assert TargetKind.INCREMENTAL.as_str() == "incremental"


def test_catalogs_exclude_all():
    assert PROFILE_NAMES == ("debug", "release", "doc")
    assert KIND_NAMES == ("build", "deps", "examples", "incremental")
