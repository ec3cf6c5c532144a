import sys

import click

from versioner.branches import BranchKind, classify_branch
from versioner.config import Settings, load_settings
from versioner.console import Reporter, configure_logger
from versioner.errors import EmptyBranchName, MissingVersionFile
from versioner.outputs import (
    append_github_output,
    build_env_pairs,
    summary_lines,
    write_build_env,
    write_version_file,
)
from versioner.resolver import VersionResolver
from versioner.sources import read_build_context, read_current_version
from versioner.version import SemanticVersion

_BANNERS = {
    BranchKind.PRODUCTION: "Production release",
    BranchKind.DEVELOPMENT: "Development build",
    BranchKind.RELEASE: "Release candidate",
    BranchKind.HOTFIX: "Hotfix detected",
    BranchKind.FEATURE: "Feature/bugfix build",
    BranchKind.UNKNOWN: "Generated version",
}


def run(settings: Settings, report: Reporter) -> int:
    """Resolve, persist and export the build version; returns the exit code."""
    ctx = read_build_context()
    report.info(f"Branch: {ctx.branch_name}", event="branch", branch=ctx.branch_name)
    report.info(f"Commit SHA: {ctx.short_sha}", event="commit", commit=ctx.short_sha)

    try:
        current = read_current_version(settings.version_file)
    except MissingVersionFile as e:
        report.error(str(e), event="missing_version_file", path=e.path)
        return 1
    report.info(
        f"Current version in {settings.version_file}: {current}",
        event="current_version",
        version=current,
    )
    if not SemanticVersion.is_valid(current):
        report.warning(f"Malformed version {current!r}, using 0.0.0", event="malformed_version")

    resolver = VersionResolver(current)
    try:
        branch = classify_branch(ctx.branch_name)
        resolved = resolver.resolve(ctx.branch_name, ctx.build_number, ctx.short_sha)
    except EmptyBranchName as e:
        report.error(f"Cannot determine version: {e}", event="empty_branch_name")
        return 1

    if branch.kind is BranchKind.UNKNOWN:
        report.warning(f"Unknown branch type: {ctx.branch_name}", event="unknown_branch")
    banner = f"{_BANNERS[branch.kind]}: {resolved.version}"
    if branch.kind is BranchKind.HOTFIX:
        report.warning(banner, event="version_resolved", kind=branch.kind.value, **resolved.model_dump())
    else:
        report.info(banner, event="version_resolved", kind=branch.kind.value, **resolved.model_dump())

    new_file_version = resolver.version_file_update(ctx.branch_name, resolved)
    if branch.kind is BranchKind.RELEASE and new_file_version is None:
        report.warning(
            f"Release branch {ctx.branch_name!r} names no version, leaving {settings.version_file} unchanged",
            event="empty_release_version",
        )
    if new_file_version is not None:
        if settings.write_version_file:
            try:
                touched = write_version_file(settings.version_file, new_file_version)
            except (OSError, ValueError) as e:
                report.error(
                    f"Cannot update {settings.version_file}: {e}", event="version_file_write_failed"
                )
                return 1
            for p in touched:
                report.info(f"Updated {p} to version: {new_file_version}", event="version_file_updated", path=str(p))
        else:
            report.info(f"Skipping version file update ({new_file_version})", event="version_file_skipped")

    pairs = build_env_pairs(resolved, ctx)
    env_path = write_build_env(settings.env_file, pairs)
    report.info(f"Version information saved to {env_path}", event="build_env_written", path=str(env_path))
    if settings.github_output:
        append_github_output(settings.github_output, pairs)

    for line in summary_lines(pairs):
        click.echo(line)
    return 0


@click.command(name="ci-version")
@click.option("--version-file", default=None, help="File holding the current version (package.json, pyproject.toml, VERSION).")
@click.option("--env-file", default=None, help="Where to write the KEY=value build environment.")
@click.option("--write-version/--no-write-version", "write_version_file", default=None, help="Persist release/hotfix versions into the version file.")
@click.option("--json-log/--no-json-log", "structured_logging", default=None, help="Emit one JSON object per log event.")
@click.option("--color/--no-color", "color", default=None, help="Colorize console output.")
def cli(**options):
    """Compute the semantic version and release tag for the current CI build."""
    settings = load_settings(**options)
    logger = configure_logger(color=settings.color, structured=settings.structured_logging)
    code = run(settings, Reporter(logger, structured=settings.structured_logging))
    sys.exit(code)


def main():
    # Convenience CLI entrypoint: `ci-version`
    cli()
