"""Migrations module — generate timestamped up/down SQL pairs."""

from prustbowo.migrations.generator import create_migration_pair, generate_migrations

__all__ = ["create_migration_pair", "generate_migrations"]
