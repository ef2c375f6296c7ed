"""Command-line interface for prustbowo.

Usage:
    prustbowo create project --name <name> [--dir <dir>]
    prustbowo create domain --name <name> [--dir <dir>]
    prustbowo create docs [--dir <dir>]
    prustbowo migrate generate [--name <name>] [--dir <dir>]
    prustbowo migrate run [--dir <dir>]
    prustbowo run dev [--dir <dir>]
    prustbowo run prod [--dir <dir>]
    prustbowo run build [--dir <dir>]
"""

import argparse
import logging
import sys

import yaml

from prustbowo.cli.create import cmd_create_docs, cmd_create_domain, cmd_create_project
from prustbowo.cli.migrate import cmd_migrate_generate, cmd_migrate_run
from prustbowo.cli.run import cmd_run_build, cmd_run_dev, cmd_run_prod


def _add_dir(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--dir", default=".",
        help="Target directory (default: current directory)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prustbowo",
        description="Scaffold and manage Rust REST API projects",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # create
    create = sub.add_parser("create", help="Create projects, domains and docs")
    create_sub = create.add_subparsers(dest="subcommand")

    proj = create_sub.add_parser("project", help="Initialize a new REST API project")
    proj.add_argument("--name", required=True, help="Project name")
    _add_dir(proj)

    dom = create_sub.add_parser(
        "domain",
        help="Generate a domain module and register its routes",
    )
    dom.add_argument("--name", required=True, help="Domain name")
    _add_dir(dom)

    docs = create_sub.add_parser(
        "docs", help="Export OpenAPI docs to docs/swagger.json",
    )
    _add_dir(docs)

    # migrate
    mig = sub.add_parser("migrate", help="Database migrations")
    mig_sub = mig.add_subparsers(dest="subcommand")

    gen = mig_sub.add_parser("generate", help="Generate migration SQL files")
    gen.add_argument(
        "--name", default=None,
        help="Migration name (default: one per domain)",
    )
    _add_dir(gen)

    mrun = mig_sub.add_parser("run", help="Run pending migrations")
    _add_dir(mrun)

    # run
    run = sub.add_parser("run", help="Build and run the server")
    run_sub = run.add_subparsers(dest="subcommand")
    for mode, help_text in (
        ("dev", "Run server in development mode"),
        ("prod", "Build and run in production mode"),
        ("build", "Build project binary"),
    ):
        _add_dir(run_sub.add_parser(mode, help=help_text))

    return parser


def _error_chain(exc: BaseException) -> list[str]:
    """Messages for *exc* and each exception that caused it."""
    lines = []
    seen = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        lines.append(str(current) or type(current).__name__)
        current = current.__cause__ or current.__context__
    return lines


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        ("create", "project"): cmd_create_project,
        ("create", "domain"): cmd_create_domain,
        ("create", "docs"): cmd_create_docs,
        ("migrate", "generate"): cmd_migrate_generate,
        ("migrate", "run"): cmd_migrate_run,
        ("run", "dev"): cmd_run_dev,
        ("run", "prod"): cmd_run_prod,
        ("run", "build"): cmd_run_build,
    }

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if not handler:
        parser.parse_args([args.command, "--help"])
        return 0

    try:
        return handler(args)
    except (OSError, ValueError, RuntimeError, yaml.YAMLError) as exc:
        first, *causes = _error_chain(exc)
        print(f"ERROR: {args.command} {subcommand} failed: {first}", file=sys.stderr)
        for line in causes:
            print(f"  caused by: {line}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
