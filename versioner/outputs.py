"""Output collaborators: version file writer and key-value exports."""
from __future__ import annotations

import json
import os
import pathlib
import re

from .resolver import ResolvedVersion
from .sources import BuildContext

_PYPROJECT_VERSION_RE = re.compile(r'^(\s*version\s*=\s*)"[^"]*"', re.MULTILINE)

BUILD_ENV_KEYS = ("VERSION", "TAG_VERSION", "IS_HOTFIX", "BRANCH_NAME", "COMMIT_SHA", "BUILD_NUMBER")


def _rewrite_json_version(p: pathlib.Path, new_version: str) -> None:
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{p} does not hold a JSON object")
    data["version"] = new_version
    # npm also keeps the lockfile's root package entry in sync
    root_pkg = data.get("packages", {}).get("") if p.name == "package-lock.json" else None
    if isinstance(root_pkg, dict):
        root_pkg["version"] = new_version
    p.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def write_version_file(path: str | os.PathLike[str], new_version: str) -> list[pathlib.Path]:
    """Persist new_version into the version file; returns every file touched."""
    p = pathlib.Path(path)
    touched = [p]
    if p.suffix == ".json":
        _rewrite_json_version(p, new_version)
        lock = p.with_name("package-lock.json")
        if p.name == "package.json" and lock.is_file():
            _rewrite_json_version(lock, new_version)
            touched.append(lock)
    elif p.name == "pyproject.toml":
        text = p.read_text(encoding="utf-8")
        text = _PYPROJECT_VERSION_RE.sub(lambda m: f'{m.group(1)}"{new_version}"', text, count=1)
        p.write_text(text, encoding="utf-8")
    else:
        p.write_text(new_version + "\n", encoding="utf-8")
    return touched


def build_env_pairs(resolved: ResolvedVersion, ctx: BuildContext) -> dict[str, str]:
    return {
        "VERSION": resolved.version,
        "TAG_VERSION": resolved.tag_version,
        "IS_HOTFIX": "true" if resolved.is_hotfix else "false",
        "BRANCH_NAME": ctx.branch_name,
        "COMMIT_SHA": ctx.short_sha,
        "BUILD_NUMBER": str(ctx.build_number),
    }


def write_build_env(path: str | os.PathLike[str], pairs: dict[str, str]) -> pathlib.Path:
    p = pathlib.Path(path)
    if p.parent != pathlib.Path("."):
        p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(f"{k}={pairs[k]}\n" for k in BUILD_ENV_KEYS), encoding="utf-8")
    return p


def append_github_output(path: str | os.PathLike[str], pairs: dict[str, str]) -> None:
    with pathlib.Path(path).open("a", encoding="utf-8") as f:
        for k in BUILD_ENV_KEYS:
            f.write(f"{k.lower()}={pairs[k]}\n")


def summary_lines(pairs: dict[str, str]) -> list[str]:
    rule = "=" * 42
    return [
        "",
        rule,
        "  Version Generation Complete",
        rule,
        f"VERSION:      {pairs['VERSION']}",
        f"TAG_VERSION:  {pairs['TAG_VERSION']}",
        f"IS_HOTFIX:    {pairs['IS_HOTFIX']}",
        f"BRANCH:       {pairs['BRANCH_NAME']}",
        f"COMMIT:       {pairs['COMMIT_SHA']}",
        f"BUILD:        {pairs['BUILD_NUMBER']}",
        rule,
    ]
