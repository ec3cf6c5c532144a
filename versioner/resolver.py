"""Derive the build version and release tag for a branch.

Rules per branch class:
- production (main, master): version file value as-is, tag v<version>.
- development (develop, development): <core>-dev.<build>+<sha>.
- release/<x>: <x>-rc.<build>+<sha>, tag v<x>; version file becomes <x>.
- hotfix/*: patch + 1, flagged as hotfix; version file becomes the new version.
- feature/, bugfix/, fix/ and anything else: <core>-<slug>.<build>+<sha>.

Everything here is pure; reading and writing files is left to the callers.
"""
from pydantic import BaseModel, ConfigDict

from .branches import BranchClass, BranchKind, classify_branch
from .version import SemanticVersion


class ResolvedVersion(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str
    tag_version: str
    is_hotfix: bool = False


def _format(current_version: str, branch: BranchClass, build_number: int, short_sha: str) -> ResolvedVersion:
    semver = SemanticVersion.parse_or_default(current_version)
    core = semver.core

    if branch.kind is BranchKind.PRODUCTION:
        return ResolvedVersion(version=current_version, tag_version=f"v{current_version}")
    if branch.kind is BranchKind.DEVELOPMENT:
        pre = f"{core}-dev.{build_number}"
        return ResolvedVersion(version=f"{pre}+{short_sha}", tag_version=f"v{pre}")
    if branch.kind is BranchKind.RELEASE:
        candidate = branch.candidate_version or ""
        return ResolvedVersion(
            version=f"{candidate}-rc.{build_number}+{short_sha}", tag_version=f"v{candidate}"
        )
    if branch.kind is BranchKind.HOTFIX:
        version = semver.bump_patch().core
        return ResolvedVersion(version=version, tag_version=f"v{version}", is_hotfix=True)
    # feature and unknown share one format
    pre = f"{core}-{branch.slug}.{build_number}"
    return ResolvedVersion(version=f"{pre}+{short_sha}", tag_version=f"v{pre}")


class VersionResolver:
    def __init__(self, current_version: str):
        self.current_version = current_version if current_version is not None else ""

    def resolve(self, branch_name: str, build_number: int = 0, short_sha: str = "") -> ResolvedVersion:
        return _format(self.current_version, classify_branch(branch_name), build_number, short_sha)

    def version_file_update(self, branch_name: str, resolved: ResolvedVersion) -> str | None:
        """Literal to persist in the version file, or None when it stays untouched.

        A bare ``release/`` branch carries no candidate and never blanks the file.
        """
        branch = classify_branch(branch_name)
        if branch.kind is BranchKind.RELEASE:
            return branch.candidate_version or None
        if branch.kind is BranchKind.HOTFIX:
            return resolved.version
        return None


def resolve_version(
    current_version: str, branch_name: str, build_number: int = 0, short_sha: str = ""
) -> ResolvedVersion:
    return VersionResolver(current_version).resolve(branch_name, build_number, short_sha)
