"""Marker-anchored registration of domains in generated files.

Two separate contracts live here:

``register_route``
    Inserts a ``use`` line after the imports marker and a router call after
    the routes marker of ``route.rs``. Markers are never consumed, so the
    file stays injectable. There is no duplicate detection: registering the
    same domain twice yields two of each line.

``register_domain_module``
    Appends ``pub mod <name>;`` to the domain ``mod.rs`` unless that exact
    line is already there. Idempotent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from prustbowo.config import DEFAULT_IMPORTS_MARKER, DEFAULT_ROUTES_MARKER

logger = logging.getLogger(__name__)

IMPORT_ENTRY = "use crate::app::domain::{name}::handler::register_{name}_routes;"
ROUTE_ENTRY = "    router = register_{name}_routes(router);"
MODULE_DECL = "pub mod {name};"


class MarkerError(ValueError):
    """The target file lacks a required anchor marker."""


@dataclass(frozen=True)
class Anchor:
    """A marker string and the entry line injected after it."""

    marker: str
    entry: str

    def render(self, name: str) -> str:
        return self.entry.format(name=name)

    @property
    def entry_prefix(self) -> str:
        """Text every rendered entry starts with, regardless of name."""
        return self.entry.split("{name}", 1)[0]


def _insert_after(content: str, anchor: Anchor, name: str) -> str:
    """Insert the entry for *name* on its own line after *anchor*'s marker.

    Entries injected earlier at the same marker sit directly below it; the
    new entry goes after them so the block keeps registration order.
    """
    idx = content.find(anchor.marker)
    if idx < 0:
        raise MarkerError(f"marker not found: {anchor.marker}")

    pos = idx + len(anchor.marker)
    prefix = anchor.entry_prefix
    if prefix:
        lead = "\n" + prefix
        while content.startswith(lead, pos):
            nl = content.find("\n", pos + 1)
            pos = len(content) if nl < 0 else nl

    return content[:pos] + "\n" + anchor.render(name) + content[pos:]


def register_route(
    route_file: Path | str,
    domain_name: str,
    imports_marker: str = DEFAULT_IMPORTS_MARKER,
    routes_marker: str = DEFAULT_ROUTES_MARKER,
) -> str:
    """Register *domain_name*'s routes in a generated route file.

    Both markers must be present or nothing is written. The import goes in
    first; the routes marker is then looked up again in the updated text,
    since the insertion shifted everything after it.

    Args:
        route_file: Path to route.rs.
        domain_name: Domain module name.
        imports_marker: Anchor for ``use`` lines.
        routes_marker: Anchor for router registration calls.

    Returns:
        The new file content.

    Raises:
        MarkerError: If either marker is missing.
    """
    path = Path(route_file)
    with open(path, encoding="utf-8", newline="") as f:
        content = f.read()

    if imports_marker not in content or routes_marker not in content:
        raise MarkerError(
            f"{path.name} missing markers {imports_marker} and {routes_marker}"
        )

    new_content = _insert_after(content, Anchor(imports_marker, IMPORT_ENTRY), domain_name)
    new_content = _insert_after(new_content, Anchor(routes_marker, ROUTE_ENTRY), domain_name)

    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(new_content)
    logger.debug("Registered routes for '%s' in %s", domain_name, path)
    return new_content


def register_domain_module(mod_file: Path | str, domain_name: str) -> bool:
    """Add ``pub mod <domain_name>;`` to the domain module list.

    A missing or unreadable file counts as empty.

    Returns:
        True if the file was written, False if the declaration was already
        present.
    """
    path = Path(mod_file)
    try:
        with open(path, encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError):
        content = ""

    decl = MODULE_DECL.format(name=domain_name)
    if decl in (line.strip() for line in content.splitlines()):
        logger.debug("%s already declares '%s'", path, domain_name)
        return False

    if content and not content.endswith("\n"):
        content += "\n"
    content += decl + "\n"
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    return True
