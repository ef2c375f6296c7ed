"""Project and domain creation.

``create_project`` stamps the project tree into ``<dir>/<name>`` and
initializes git. ``create_domain`` stamps the domain tree into the domain
root and registers it in route.rs and the domain mod.rs.
"""

from __future__ import annotations

import logging
from pathlib import Path

from prustbowo.commands.orchestrator import init_git
from prustbowo.commands.runner import CommandRunner
from prustbowo.config import ProjectConfig, load_config
from prustbowo.scaffold.inject import register_domain_module, register_route
from prustbowo.scaffold.placeholders import replace_placeholders
from prustbowo.templates import (
    CRATE_IDENT_TOKEN,
    DOMAIN_NAME_TOKEN,
    DOMAIN_TREE,
    PROJECT_NAME_TOKEN,
    PROJECT_TREE,
    TemplateTree,
)

logger = logging.getLogger(__name__)

# Names are stamped single-quoted into prustbowo.yaml and used as a directory
UNSAFE_NAME_CHARS = frozenset("'/\\\n\r\0")


def crate_ident(project_name: str) -> str:
    """Identifier-safe crate name: ``my-api`` → ``my_api``."""
    return project_name.replace("-", "_")


def create_project(
    name: str,
    parent_dir: Path | str = ".",
    template: TemplateTree = PROJECT_TREE,
    runner: CommandRunner | None = None,
    git: bool = True,
) -> dict:
    """Create a new project directory from the project template.

    Args:
        name: Project name (also the directory name).
        parent_dir: Directory to create the project in.
        template: Template tree to extract.
        runner: Process runner for git.
        git: Whether to initialize a git repository.

    Returns:
        Dict with keys: path, crate, files, git.

    Raises:
        FileExistsError: If the target directory already exists.
        ValueError: If the name is empty or cannot be stamped into
            prustbowo.yaml and the directory tree.
    """
    if not name:
        raise ValueError("Project name must not be empty")
    bad = sorted(c for c in set(name) if c in UNSAFE_NAME_CHARS)
    if bad:
        raise ValueError(f"Project name {name!r} contains unsupported characters: {bad}")

    project_dir = Path(parent_dir) / name
    if project_dir.exists():
        raise FileExistsError(f"target directory already exists: {project_dir}")
    project_dir.mkdir(parents=True)

    files = template.extract(project_dir)
    ident = crate_ident(name)
    replace_placeholders(project_dir, PROJECT_NAME_TOKEN, name)
    replace_placeholders(project_dir, CRATE_IDENT_TOKEN, ident)

    git_ok = False
    if git:
        config = ProjectConfig(name=name, crate=ident)
        git_ok = init_git(project_dir, config=config, runner=runner)

    logger.info("Created project %s (%d files)", project_dir, len(files))
    return {
        "path": str(project_dir),
        "crate": ident,
        "files": len(files),
        "git": git_ok,
    }


def create_domain(
    name: str,
    project_dir: Path | str = ".",
    template: TemplateTree = DOMAIN_TREE,
    config: ProjectConfig | None = None,
) -> dict:
    """Generate a domain module and register it.

    Steps run in order (extract, substitute, route registration, module
    registration); a failure stops the sequence and keeps earlier steps.

    Returns:
        Dict with keys: path, route_file, module_added.
    """
    if not name:
        raise ValueError("Domain name must not be empty")

    path = Path(project_dir).resolve()
    cfg = config or load_config(path)

    domain_dir = cfg.domain_root(path) / name
    domain_dir.mkdir(parents=True, exist_ok=True)
    template.extract(domain_dir)
    replace_placeholders(domain_dir, DOMAIN_NAME_TOKEN, name)

    route_file = cfg.route_file(path)
    register_route(
        route_file,
        name,
        imports_marker=cfg.markers.imports,
        routes_marker=cfg.markers.routes,
    )
    added = register_domain_module(cfg.domain_module_file(path), name)

    logger.info("Created domain %s", domain_dir)
    return {
        "path": str(domain_dir),
        "route_file": str(route_file),
        "module_added": added,
    }
