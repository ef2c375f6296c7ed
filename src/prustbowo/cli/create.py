"""Create CLI commands — project, domain, docs."""

import argparse


def cmd_create_project(args: argparse.Namespace) -> int:
    from prustbowo.scaffold.project import create_project

    result = create_project(name=args.name, parent_dir=args.dir)

    print(f"  Created project: {result['path']}")
    print(f"  Crate: {result['crate']}")
    print(f"  Files: {result['files']}")
    if not result["git"]:
        print("  (git repository not initialized)")
    return 0


def cmd_create_domain(args: argparse.Namespace) -> int:
    from prustbowo.scaffold.project import create_domain

    result = create_domain(name=args.name, project_dir=args.dir)

    print(f"  Created domain: {result['path']}")
    print(f"  Routes registered in {result['route_file']}")
    if not result["module_added"]:
        print(f"  Module '{args.name}' was already declared")
    return 0


def cmd_create_docs(args: argparse.Namespace) -> int:
    from prustbowo.commands.orchestrator import export_docs

    out = export_docs(args.dir)
    if out is None:
        print("  OpenAPI export failed; no docs written")
    else:
        print(f"  Wrote {out}")
    return 0
