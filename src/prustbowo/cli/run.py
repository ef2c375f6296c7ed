"""Run CLI commands — dev server, release run, build."""

import argparse


def cmd_run_dev(args: argparse.Namespace) -> int:
    from prustbowo.commands.orchestrator import run_dev

    run_dev(args.dir)
    return 0


def cmd_run_prod(args: argparse.Namespace) -> int:
    from prustbowo.commands.orchestrator import run_prod

    if not run_prod(args.dir):
        print("  Release build finished but no server binary was found")
    return 0


def cmd_run_build(args: argparse.Namespace) -> int:
    from prustbowo.commands.orchestrator import run_build

    run_build(args.dir)
    return 0
