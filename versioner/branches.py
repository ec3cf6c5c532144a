import re
from enum import Enum

from pydantic import BaseModel, ConfigDict

from .errors import EmptyBranchName

SLUG_MAX_LENGTH = 20
_UNSAFE_RE = re.compile(r"[^A-Za-z0-9]")

PRODUCTION_BRANCHES = ("main", "master")
DEVELOPMENT_BRANCHES = ("develop", "development")
RELEASE_PREFIX = "release/"
HOTFIX_PREFIX = "hotfix/"
FEATURE_PREFIXES = ("feature/", "bugfix/", "fix/")


class BranchKind(str, Enum):
    PRODUCTION = "production"
    DEVELOPMENT = "development"
    RELEASE = "release"
    HOTFIX = "hotfix"
    FEATURE = "feature"
    UNKNOWN = "unknown"


class BranchClass(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: BranchKind
    name: str
    candidate_version: str | None = None  # release only
    slug: str | None = None  # feature / unknown only


def slugify(name: str) -> str:
    # Idempotent: the output alphabet is a subset of what is kept
    return _UNSAFE_RE.sub("-", name)[:SLUG_MAX_LENGTH]


def classify_branch(branch_name: str) -> BranchClass:
    """Map a branch name onto exactly one BranchClass; first match wins."""
    if not branch_name:
        raise EmptyBranchName()
    if branch_name in PRODUCTION_BRANCHES:
        return BranchClass(kind=BranchKind.PRODUCTION, name=branch_name)
    if branch_name in DEVELOPMENT_BRANCHES:
        return BranchClass(kind=BranchKind.DEVELOPMENT, name=branch_name)
    if branch_name.startswith(RELEASE_PREFIX):
        return BranchClass(
            kind=BranchKind.RELEASE,
            name=branch_name,
            candidate_version=branch_name[len(RELEASE_PREFIX):],
        )
    if branch_name.startswith(HOTFIX_PREFIX):
        return BranchClass(kind=BranchKind.HOTFIX, name=branch_name)
    for prefix in FEATURE_PREFIXES:
        if branch_name.startswith(prefix):
            return BranchClass(
                kind=BranchKind.FEATURE,
                name=branch_name,
                slug=slugify(branch_name[len(prefix):]),
            )
    return BranchClass(kind=BranchKind.UNKNOWN, name=branch_name, slug=slugify(branch_name))
