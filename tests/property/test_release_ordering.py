from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from create_tau_app.adapters.github_registry import GitHubReleaseRegistry
from create_tau_app.domain.errors import NoValidReleasesError
from create_tau_app.domain.release import ReleaseSet

from doubles import DummyResponse, DummySession, github_release

JUNK_TAGS = ["latest", "nightly", "1.0", "v1", "1.0.0.0", "release-2", "01.0.0", "1.0.0-01"]

_part = st.integers(min_value=0, max_value=12)
_numeric_id = st.integers(min_value=0, max_value=12).map(str)
_alnum_id = st.text(alphabet="abrc-", min_size=1, max_size=4)
_prerelease = st.lists(st.one_of(_numeric_id, _alnum_id), min_size=1, max_size=3).map(".".join)
_build = st.lists(st.text(alphabet="0123456789abz-", min_size=1, max_size=4), min_size=1, max_size=2).map(".".join)


@st.composite
def semver_tag(draw: st.DrawFn) -> str:
    tag = f"{draw(_part)}.{draw(_part)}.{draw(_part)}"
    if draw(st.booleans()):
        tag += f"-{draw(_prerelease)}"
    if draw(st.booleans()):
        tag += f"+{draw(_build)}"
    return tag


def precedence(tag: str) -> tuple[object, ...]:
    """Sort key following the SemVer 2.0 precedence rules."""

    core, _, _build_meta = tag.partition("+")
    release, _, pre = core.partition("-")
    major, minor, patch = (int(part) for part in release.split("."))
    if not pre:
        return (major, minor, patch, 1, ())
    identifiers = tuple((0, int(item), "") if item.isdigit() else (1, 0, item) for item in pre.split("."))
    return (major, minor, patch, 0, identifiers)


@st.composite
def release_payload(draw: st.DrawFn) -> dict[str, object]:
    kind = draw(st.sampled_from(["valid", "draft", "prerelease", "junk"]))
    if kind == "junk":
        return github_release(draw(st.sampled_from(JUNK_TAGS)))
    tag = draw(semver_tag())
    return github_release(tag, draft=kind == "draft", prerelease=kind == "prerelease")


def test_precedence_key_matches_documented_order() -> None:
    ordered = [
        "1.0.0-alpha",
        "1.0.0-alpha.1",
        "1.0.0-alpha.beta",
        "1.0.0-beta",
        "1.0.0-beta.2",
        "1.0.0-beta.11",
        "1.0.0-rc.1",
        "1.0.0",
    ]

    assert sorted(reversed(ordered), key=precedence) == ordered


@settings(max_examples=80)
@given(tags=st.lists(semver_tag(), min_size=1, max_size=20, unique=True), data=st.data())
def test_latest_has_highest_precedence_in_any_order(tags: list[str], data: st.DataObject) -> None:
    shuffled = data.draw(st.permutations(tags))

    releases = ReleaseSet.from_releases({tag: f"url-{tag}" for tag in shuffled})

    assert set(releases.versions) == set(tags)
    assert releases.latest is not None
    # Tags differing only in build metadata share precedence.
    assert precedence(releases.latest) == max(precedence(tag) for tag in tags)


@settings(max_examples=60)
@given(payload=st.lists(release_payload(), min_size=1, max_size=30))
def test_filtered_releases_never_listed(payload: list[dict[str, object]]) -> None:
    session = DummySession([DummyResponse(200, payload)])
    registry = GitHubReleaseRegistry("kherge", "js.tau", session=session, token_env=None)  # type: ignore[arg-type]

    accepted: set[str] = set()
    for item in payload:
        tag = str(item["tag_name"])
        if item["draft"] or item["prerelease"] or tag in JUNK_TAGS:
            continue
        accepted.add(tag)

    if not accepted:
        with pytest.raises(NoValidReleasesError):
            registry.list_releases()
        return
    releases = registry.list_releases()

    assert set(releases.versions) == accepted
    assert precedence(releases.latest or "") == max(precedence(tag) for tag in accepted)
    excluded = {
        str(item["tag_name"])
        for item in payload
        if (item["draft"] or item["prerelease"]) and str(item["tag_name"]) not in accepted
    }
    assert not excluded & set(releases.versions)
