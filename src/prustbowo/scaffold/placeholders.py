"""Literal placeholder substitution across an extracted tree.

This is plain find/replace, not a template language. A token that also
occurs as an ordinary substring of file content is replaced too; callers
pick tokens unlikely to collide (``__UPPER_CASE__``).
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    """Read a file as UTF-8, keeping its newlines. Undecodable files read as ""."""
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError:
        logger.debug("Skipping non-text file %s", path)
        return ""


def replace_placeholders(root: Path | str, token: str, value: str) -> list[Path]:
    """Replace every occurrence of *token* with *value* in files under *root*.

    Only file content is rewritten; file and directory names are left as
    extracted. A failed write aborts the walk and propagates, and files
    already rewritten stay rewritten.

    Args:
        root: Directory to walk.
        token: Literal placeholder string.
        value: Replacement text.

    Returns:
        Paths of the files that were rewritten.
    """
    if not token:
        raise ValueError("Placeholder token must not be empty")

    changed = []
    for path in sorted(Path(root).rglob("*")):
        if not path.is_file():
            continue
        content = _read_text(path)
        if token not in content:
            continue
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content.replace(token, value))
        changed.append(path)

    logger.debug("Replaced %s in %d file(s) under %s", token, len(changed), root)
    return changed
