import re

from pydantic import BaseModel, ConfigDict, Field

from .errors import MalformedVersionString

_SEMVER_RE = re.compile(
    r"^(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)


class SemanticVersion(BaseModel):
    model_config = ConfigDict(frozen=True)

    major: int = Field(default=0, ge=0)
    minor: int = Field(default=0, ge=0)
    patch: int = Field(default=0, ge=0)
    prerelease: str | None = None

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        """Strict parse of MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD].

        Build metadata is accepted and discarded.
        """
        m = _SEMVER_RE.match((text or "").strip())
        if not m:
            raise MalformedVersionString(text)
        return cls(
            major=int(m.group("major")),
            minor=int(m.group("minor")),
            patch=int(m.group("patch")),
            prerelease=m.group("prerelease"),
        )

    @classmethod
    def parse_or_default(cls, text: str | None) -> "SemanticVersion":
        try:
            return cls.parse(text or "")
        except MalformedVersionString:
            return cls()

    @classmethod
    def is_valid(cls, text: str | None) -> bool:
        return bool(_SEMVER_RE.match((text or "").strip()))

    @property
    def core(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def bump_patch(self) -> "SemanticVersion":
        return SemanticVersion(major=self.major, minor=self.minor, patch=self.patch + 1)

    def __str__(self) -> str:
        if self.prerelease:
            return f"{self.core}-{self.prerelease}"
        return self.core
