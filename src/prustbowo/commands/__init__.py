"""Commands module — external build, run, migrate and docs tooling."""

from prustbowo.commands.orchestrator import (
    MigrationOutcome,
    export_docs,
    init_git,
    migrate_run,
    run_build,
    run_dev,
    run_prod,
)
from prustbowo.commands.runner import CommandError, CommandRunner

__all__ = [
    "CommandError",
    "CommandRunner",
    "MigrationOutcome",
    "export_docs",
    "init_git",
    "migrate_run",
    "run_build",
    "run_dev",
    "run_prod",
]
