"""Timestamped diesel migration pairs.

Layout: ``<migrations_dir>/<YYYYMMDDHHMMSS>_<name>/{up,down}.sql``.
Timestamps have second resolution, so two pairs for the same name created
within one second share a directory.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from prustbowo.config import ProjectConfig, load_config

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
UP_SQL = "-- Write your up migration here\n"
DOWN_SQL = "-- Write your down migration here\n"


def migration_dir_name(name: str, now: datetime | None = None) -> str:
    ts = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return f"{ts}_{name}"


def create_migration_pair(
    migrations_dir: Path | str,
    name: str,
    now: datetime | None = None,
) -> Path:
    """Create one migration directory with placeholder up/down files.

    The directory may already exist; the two files are overwritten.

    Returns:
        The migration directory.
    """
    if not name:
        raise ValueError("Migration name must not be empty")

    mig_dir = Path(migrations_dir) / migration_dir_name(name, now)
    mig_dir.mkdir(parents=True, exist_ok=True)
    (mig_dir / "up.sql").write_text(UP_SQL)
    (mig_dir / "down.sql").write_text(DOWN_SQL)
    logger.debug("Created migration %s", mig_dir)
    return mig_dir


def domain_names(domain_root: Path) -> list[str]:
    """Immediate subdirectories of the domain root, sorted."""
    if not domain_root.is_dir():
        return []
    return sorted(p.name for p in domain_root.iterdir() if p.is_dir())


def generate_migrations(
    project_dir: Path | str,
    name: str | None = None,
    config: ProjectConfig | None = None,
    now: datetime | None = None,
) -> list[Path]:
    """Generate a named migration, or one ``create_<domain>_table`` per domain.

    The batch stops at the first error.

    Args:
        project_dir: Project root.
        name: Migration name. If None, derive names from domain directories;
            an empty string is rejected rather than treated as None.
        config: Project settings. Loaded from prustbowo.yaml if None.
        now: Timestamp to use (defaults to the current local time).

    Returns:
        Created migration directories.
    """
    path = Path(project_dir).resolve()
    cfg = config or load_config(path)
    migrations_dir = cfg.migrations_dir(path)
    migrations_dir.mkdir(parents=True, exist_ok=True)

    if name is not None:
        return [create_migration_pair(migrations_dir, name, now)]

    created = []
    for domain in domain_names(cfg.domain_root(path)):
        created.append(create_migration_pair(migrations_dir, f"create_{domain}_table", now))
    return created
