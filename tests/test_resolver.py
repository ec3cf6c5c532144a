import pytest

from versioner.errors import EmptyBranchName
from versioner.resolver import ResolvedVersion, VersionResolver, resolve_version


def test_production_main():
    r = resolve_version("1.2.3", "main")
    assert r == ResolvedVersion(version="1.2.3", tag_version="v1.2.3", is_hotfix=False)


@pytest.mark.parametrize("current", ["1.2.3", "1.2.3-beta.1", "garbage", ""])
def test_production_keeps_version_verbatim(current):
    r = resolve_version(current, "master", 9, "abc1234")
    assert r.version == current
    assert r.tag_version == f"v{current}"


def test_development():
    r = resolve_version("1.2.3", "develop", 42, "abc1234")
    assert r.version == "1.2.3-dev.42+abc1234"
    assert r.tag_version == "v1.2.3-dev.42"
    assert r.is_hotfix is False


def test_release_candidate():
    r = resolve_version("1.2.3", "release/2.0.0", 5, "abc1234")
    assert r.version == "2.0.0-rc.5+abc1234"
    assert r.tag_version == "v2.0.0"
    assert r.is_hotfix is False


def test_hotfix_bumps_patch():
    r = resolve_version("1.2.3", "hotfix/urgent")
    assert r == ResolvedVersion(version="1.2.4", tag_version="v1.2.4", is_hotfix=True)


def test_hotfix_on_prerelease_version():
    assert resolve_version("3.0.9-rc.1", "hotfix/x").version == "3.0.10"


def test_feature_slug_version():
    r = resolve_version("1.2.3", "feature/My_Cool-Thing!!", 1, "0000000")
    assert r.version == "1.2.3-My-Cool-Thing--.1+0000000"
    assert r.tag_version == "v1.2.3-My-Cool-Thing--.1"


def test_unknown_branch_uses_full_slug():
    r = resolve_version("1.2.3", "renovate/pydantic-2.x", 3, "deadbee")
    assert r.version == "1.2.3-renovate-pydantic-2-.3+deadbee"
    assert r.is_hotfix is False


def test_malformed_current_version_defaults_to_zero():
    assert resolve_version("oops", "develop", 1, "abc1234").version == "0.0.0-dev.1+abc1234"
    assert resolve_version("oops", "hotfix/a").version == "0.0.1"


def test_default_build_and_sha():
    assert resolve_version("1.2.3", "develop").version == "1.2.3-dev.0+"


@pytest.mark.parametrize("branch", ["main", "develop", "release/1.0.0", "feature/a", "other"])
def test_only_hotfix_flags_hotfix(branch):
    assert resolve_version("1.2.3", branch, 1, "abc1234").is_hotfix is False


def test_empty_branch_fails():
    with pytest.raises(EmptyBranchName):
        resolve_version("1.2.3", "")


def test_version_file_update_only_for_release_and_hotfix():
    resolver = VersionResolver("1.2.3")
    rel = resolver.resolve("release/2.0.0", 5, "abc1234")
    assert resolver.version_file_update("release/2.0.0", rel) == "2.0.0"
    hot = resolver.resolve("hotfix/x")
    assert resolver.version_file_update("hotfix/x", hot) == "1.2.4"
    for branch in ["main", "develop", "feature/a", "other"]:
        assert resolver.version_file_update(branch, resolver.resolve(branch)) is None


def test_resolved_version_is_immutable():
    r = resolve_version("1.2.3", "main")
    with pytest.raises(Exception):
        r.version = "9.9.9"


def test_bare_release_branch_does_not_blank_version_file():
    resolver = VersionResolver("1.2.3")
    resolved = resolver.resolve("release/", 2, "abc1234")
    assert resolved.version == "-rc.2+abc1234"
    assert resolver.version_file_update("release/", resolved) is None


def test_non_ascii_digit_version_falls_back_for_hotfix():
    assert resolve_version("١.٢.٣", "hotfix/x").version == "0.0.1"
