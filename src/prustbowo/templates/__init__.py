"""Bundled template trees.

Templates are plain Python constants so they ship inside the package and
need no filesystem lookup at run time. Each tree maps a relative POSIX path
to file content; placeholder tokens are resolved after extraction by
``prustbowo.scaffold.placeholders``.

Callers take a ``TemplateTree`` argument (defaulting to the bundled trees),
so tests can extract fixture trees instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import Mapping

from prustbowo.templates.domain import DOMAIN_FILES
from prustbowo.templates.project import PROJECT_FILES

logger = logging.getLogger(__name__)

# Placeholder tokens stamped into template content
PROJECT_NAME_TOKEN = "__PROJECT_NAME__"
CRATE_IDENT_TOKEN = "__CRATE_IDENT__"
DOMAIN_NAME_TOKEN = "__DOMAIN_NAME__"


@dataclass(frozen=True)
class TemplateTree:
    """A named, read-only set of (relative path → content) entries."""

    name: str
    files: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for rel in self.files:
            p = PurePosixPath(rel)
            if p.is_absolute() or ".." in p.parts:
                raise ValueError(f"Template '{self.name}' has unsafe path: {rel}")
        object.__setattr__(self, "files", MappingProxyType(dict(self.files)))

    def paths(self) -> list[str]:
        return sorted(self.files)

    def extract(self, dest: Path | str) -> list[Path]:
        """Write every entry under *dest*, creating parent directories.

        Existing files are overwritten. Returns the written paths.
        """
        root = Path(dest)
        written = []
        for rel in self.paths():
            target = root.joinpath(*PurePosixPath(rel).parts)
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, "w", encoding="utf-8", newline="") as f:
                f.write(self.files[rel])
            written.append(target)
        logger.debug("Extracted %d file(s) from '%s' into %s", len(written), self.name, root)
        return written


PROJECT_TREE = TemplateTree("project", PROJECT_FILES)
DOMAIN_TREE = TemplateTree("domain", DOMAIN_FILES)

__all__ = [
    "TemplateTree",
    "PROJECT_TREE",
    "DOMAIN_TREE",
    "PROJECT_NAME_TOKEN",
    "CRATE_IDENT_TOKEN",
    "DOMAIN_NAME_TOKEN",
]
