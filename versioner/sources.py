"""Input collaborators: CI/git build context and the version file reader."""
from __future__ import annotations

import json
import os
import pathlib
import re
import subprocess
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from .errors import MissingVersionFile

DEFAULT_VERSION = "0.0.0"
SHORT_SHA_LENGTH = 7
_PYPROJECT_VERSION_RE = re.compile(r'^\s*version\s*=\s*"([^"]*)"', re.MULTILINE)


class BuildContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    branch_name: str
    build_number: int = 0
    short_sha: str = ""


def _git(*args: str) -> str | None:
    try:
        out = subprocess.check_output(["git", *args], text=True, stderr=subprocess.DEVNULL).strip()
    except (subprocess.CalledProcessError, OSError):
        return None
    return out or None


def branch_from_env(env: Mapping[str, str]) -> str | None:
    name = env.get("GITHUB_REF_NAME")
    if name:
        return name
    ref = env.get("GITHUB_REF", "")
    if ref.startswith("refs/heads/"):
        return ref[len("refs/heads/"):]
    return None


def build_number_from_env(env: Mapping[str, str]) -> int:
    try:
        value = int(env.get("GITHUB_RUN_NUMBER", "0") or "0")
    except ValueError:
        return 0
    return value if value >= 0 else 0


def read_build_context(env: Mapping[str, str] | None = None) -> BuildContext:
    env = os.environ if env is None else env
    branch = branch_from_env(env) or _git("rev-parse", "--abbrev-ref", "HEAD") or ""
    commit = env.get("GITHUB_SHA") or _git("rev-parse", "HEAD") or ""
    return BuildContext(
        branch_name=branch.strip(),
        build_number=build_number_from_env(env),
        short_sha=commit.strip()[:SHORT_SHA_LENGTH].lower(),
    )


def read_current_version(path: str | os.PathLike[str]) -> str:
    """Read the version recorded in a package.json, pyproject.toml or plain text file.

    Raises MissingVersionFile when the file does not exist. A file that exists
    but carries no readable version yields 0.0.0.
    """
    p = pathlib.Path(path)
    if not p.is_file():
        raise MissingVersionFile(p)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return DEFAULT_VERSION

    if p.suffix == ".json":
        try:
            value = json.loads(text).get("version")
        except (ValueError, AttributeError):
            return DEFAULT_VERSION
        return str(value).strip() if value else DEFAULT_VERSION
    if p.name == "pyproject.toml":
        m = _PYPROJECT_VERSION_RE.search(text)
        return m.group(1).strip() if m and m.group(1).strip() else DEFAULT_VERSION
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return DEFAULT_VERSION
