"""Project settings from prustbowo.yaml.

Every generated project carries a ``prustbowo.yaml`` at its root. All keys
are optional; anything missing falls back to the defaults below, so older
projects (or hand-made ones) without the file still work.

Environment variables:
    PRUSTBOWO_CARGO — cargo executable (overrides tools.cargo)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_FILENAME = "prustbowo.yaml"

DEFAULT_IMPORTS_MARKER = "// <prustbowo:imports>"
DEFAULT_ROUTES_MARKER = "// <prustbowo:routes>"


@dataclass
class Layout:
    """Project-relative locations the scaffolder reads and writes."""

    domain_root: str = "src/app/domain"
    route_file: str = "src/app/route.rs"
    migrations_dir: str = "db/migrations"
    docs_file: str = "docs/swagger.json"


@dataclass
class Markers:
    imports: str = DEFAULT_IMPORTS_MARKER
    routes: str = DEFAULT_ROUTES_MARKER


@dataclass
class Tools:
    """External programs and project binary names."""

    cargo: str = "cargo"
    diesel: str = "diesel"
    git: str = "git"
    server_bin: str = "server"
    migrate_bin: str = "migrate"
    docs_bin: str = "export-openapi"


@dataclass
class ProjectConfig:
    name: str = ""
    crate: str = ""
    layout: Layout = field(default_factory=Layout)
    markers: Markers = field(default_factory=Markers)
    tools: Tools = field(default_factory=Tools)

    def domain_root(self, project_dir: Path) -> Path:
        return project_dir / self.layout.domain_root

    def route_file(self, project_dir: Path) -> Path:
        return project_dir / self.layout.route_file

    def domain_module_file(self, project_dir: Path) -> Path:
        """The aggregator file listing one ``pub mod`` per domain."""
        return self.domain_root(project_dir) / "mod.rs"

    def migrations_dir(self, project_dir: Path) -> Path:
        return project_dir / self.layout.migrations_dir

    def docs_file(self, project_dir: Path) -> Path:
        return project_dir / self.layout.docs_file


def _section(data: dict, key: str, cls: type):
    """Build a settings section, ignoring unknown keys."""
    raw = data.get(key) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"'{key}' in {CONFIG_FILENAME} must be a mapping")
    known = cls.__dataclass_fields__
    return cls(**{k: str(v) for k, v in raw.items() if k in known})


def load_config(project_dir: Path | str) -> ProjectConfig:
    """Read ``prustbowo.yaml`` from *project_dir*.

    Args:
        project_dir: Project root.

    Returns:
        ProjectConfig with defaults for anything unset.

    Raises:
        ValueError: If the file is not a YAML mapping.
        yaml.YAMLError: If the YAML is malformed.
    """
    path = Path(project_dir) / CONFIG_FILENAME
    data: dict = {}
    if path.is_file():
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{CONFIG_FILENAME} at {path} is not a YAML mapping")

    config = ProjectConfig(
        name=str(data.get("name") or ""),
        crate=str(data.get("crate") or ""),
        layout=_section(data, "layout", Layout),
        markers=_section(data, "markers", Markers),
        tools=_section(data, "tools", Tools),
    )

    env_cargo = os.environ.get("PRUSTBOWO_CARGO")
    if env_cargo:
        config.tools.cargo = env_cargo
    return config
