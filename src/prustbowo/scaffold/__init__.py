"""Scaffold module — template extraction, placeholder substitution, marker injection."""

from prustbowo.scaffold.inject import MarkerError, register_domain_module, register_route
from prustbowo.scaffold.placeholders import replace_placeholders
from prustbowo.scaffold.project import create_domain, create_project

__all__ = [
    "MarkerError",
    "register_domain_module",
    "register_route",
    "replace_placeholders",
    "create_domain",
    "create_project",
]
