"""Migration CLI commands."""

import argparse


def cmd_migrate_generate(args: argparse.Namespace) -> int:
    from prustbowo.migrations.generator import generate_migrations

    created = generate_migrations(args.dir, name=args.name)

    if not created:
        print("  No domains found; no migrations generated.")
        return 0
    print(f"  Generated {len(created)} migration(s):")
    for path in created:
        print(f"    - {path.name}")
    return 0


def cmd_migrate_run(args: argparse.Namespace) -> int:
    from prustbowo.commands.orchestrator import MigrationOutcome, migrate_run

    outcome = migrate_run(args.dir)

    if outcome is MigrationOutcome.PRIMARY:
        print("  Migrations applied via project migrate bin")
    elif outcome is MigrationOutcome.FALLBACK:
        print("  Migrations applied via diesel CLI")
    else:
        print("  WARNING: migrations not applied (no working migration runner)")
    return 0
