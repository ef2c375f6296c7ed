"""Build, run, migrate and export via external tools.

Failure policy per operation:

- ``run_dev``, ``run_build``, ``run_prod``: errors propagate.
- ``init_git``: errors are logged and swallowed.
- ``migrate_run``: tries the project's migrate binary, then the diesel CLI,
  and reports a ``MigrationOutcome`` instead of raising.
- ``export_docs``: exporter failure is logged and no artifact is written.
"""

from __future__ import annotations

import enum
import logging
from pathlib import Path

from prustbowo.commands.runner import CommandError, CommandRunner
from prustbowo.config import ProjectConfig, load_config

logger = logging.getLogger(__name__)

INIT_COMMIT_MESSAGE = "chore: init from prustbowo"


class MigrationOutcome(enum.Enum):
    PRIMARY = "primary"
    FALLBACK = "fallback"
    DEGRADED = "degraded"

    @property
    def applied(self) -> bool:
        return self is not MigrationOutcome.DEGRADED


def _setup(
    project_dir: Path | str,
    config: ProjectConfig | None,
    runner: CommandRunner | None,
) -> tuple[Path, ProjectConfig, CommandRunner]:
    path = Path(project_dir).resolve()
    return path, config or load_config(path), runner or CommandRunner()


def init_git(
    project_dir: Path | str,
    config: ProjectConfig | None = None,
    runner: CommandRunner | None = None,
) -> bool:
    """Initialize a repository and commit the scaffold.

    Any failure (git missing, no commit identity) is logged and ignored.

    Returns:
        True if all three steps succeeded.
    """
    path, cfg, run = _setup(project_dir, config, runner)
    git = cfg.tools.git
    ok = True
    for argv in (
        [git, "init"],
        [git, "add", "."],
        [git, "commit", "-m", INIT_COMMIT_MESSAGE],
    ):
        try:
            run.run(argv, path, quiet=True)
        except CommandError as exc:
            logger.warning("git step skipped: %s", exc)
            ok = False
    return ok


def run_dev(
    project_dir: Path | str,
    config: ProjectConfig | None = None,
    runner: CommandRunner | None = None,
) -> None:
    path, cfg, run = _setup(project_dir, config, runner)
    run.run([cfg.tools.cargo, "run", "--bin", cfg.tools.server_bin], path)


def run_build(
    project_dir: Path | str,
    config: ProjectConfig | None = None,
    runner: CommandRunner | None = None,
) -> None:
    path, cfg, run = _setup(project_dir, config, runner)
    run.run([cfg.tools.cargo, "build"], path)


def run_prod(
    project_dir: Path | str,
    config: ProjectConfig | None = None,
    runner: CommandRunner | None = None,
) -> bool:
    """Build in release mode, then run the release server binary.

    Returns:
        False if the build produced no server binary to run.
    """
    path, cfg, run = _setup(project_dir, config, runner)
    run.run([cfg.tools.cargo, "build", "--release"], path)

    exe = path / "target" / "release" / cfg.tools.server_bin
    if not exe.exists():
        logger.warning("Release binary not found: %s", exe)
        return False
    run.run([str(exe)], path)
    return True


def migrate_run(
    project_dir: Path | str,
    config: ProjectConfig | None = None,
    runner: CommandRunner | None = None,
) -> MigrationOutcome:
    """Apply pending migrations, falling back to the diesel CLI.

    Never raises for tool failures: migrations are optional tooling and
    must not block scaffolding workflows.
    """
    path, cfg, run = _setup(project_dir, config, runner)
    try:
        run.run([cfg.tools.cargo, "run", "--bin", cfg.tools.migrate_bin], path)
        return MigrationOutcome.PRIMARY
    except CommandError as exc:
        logger.warning("failed to run migrations via project migrate bin: %s", exc)

    try:
        run.run([cfg.tools.diesel, "migration", "run"], path)
        return MigrationOutcome.FALLBACK
    except CommandError as exc:
        logger.warning("diesel CLI fallback failed: %s", exc)
    return MigrationOutcome.DEGRADED


def export_docs(
    project_dir: Path | str,
    config: ProjectConfig | None = None,
    runner: CommandRunner | None = None,
) -> Path | None:
    """Write the OpenAPI document printed by the export binary.

    Returns:
        The written file, or None if the exporter failed.
    """
    path, cfg, run = _setup(project_dir, config, runner)
    out_file = cfg.docs_file(path)
    out_file.parent.mkdir(parents=True, exist_ok=True)

    try:
        spec_json = run.read([cfg.tools.cargo, "run", "--bin", cfg.tools.docs_bin], path)
    except CommandError as exc:
        logger.warning("failed to export OpenAPI via project %s bin: %s", cfg.tools.docs_bin, exc)
        return None

    out_file.write_text(spec_json)
    return out_file
