"""Wren CLI — resolve route params and classify segments from the shell.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — route param resolution for nested layout trees.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren resolve -----------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve route params for a pathname")
    resolve_parser.add_argument("tree", help="Path to a JSON loader tree")
    resolve_parser.add_argument("pathname", help="Matched pathname (e.g. /blog/[slug])")
    resolve_parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Param already bound by an enclosing layout (repeat for a list)",
    )
    resolve_parser.add_argument(
        "--fallback",
        action="append",
        default=[],
        metavar="NAME:TYPE",
        help="Param already known to be a fallback (TYPE: dynamic, catchall, optional-catchall)",
    )
    resolve_parser.add_argument(
        "--allow-groups",
        action="store_true",
        help="Accept route group and parallel route segments in the pathname",
    )
    resolve_parser.add_argument(
        "--keep-duplicates",
        action="store_true",
        help="Record a fallback param again when its name is already recorded",
    )

    # -- wren classify ----------------------------------------------------
    classify_parser = subparsers.add_parser("classify", help="Classify loader tree segments")
    classify_parser.add_argument("segments", nargs="+", help="Raw segments (e.g. '[...slug]')")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "resolve":
        from wren.cli._resolve import run_resolve

        run_resolve(args)
    elif args.command == "classify":
        from wren.cli._classify import run_classify

        run_classify(args)
