"""Main CLI entry point for templatehash."""
# ruff: noqa: T201

import argparse
import logging
import sys
from pathlib import Path

from templatehash.cli.commands import hash_cmd, tree_cmd


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="templatehash",
        description="Deterministic content fingerprints for database template definitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  templatehash hash migrations/ fixtures/seed.sql
  templatehash hash --json schema.sql
  templatehash tree migrations/ --workers 4
        """,
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        metavar="COMMAND"
    )

    hash_parser = subparsers.add_parser(
        "hash",
        help="Fingerprint files and directories as one template",
        description="Combine the fingerprints of the given paths, in order, into one template fingerprint",
    )
    hash_cmd.add_arguments(hash_parser)

    tree_parser = subparsers.add_parser(
        "tree",
        help="Show per-file digests of a directory",
        description="List every file digest in reduction order followed by the directory fingerprint",
    )
    tree_cmd.add_arguments(tree_parser)

    return parser


def main(args: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    log_level = logging.DEBUG if parsed_args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    try:
        if parsed_args.command == "hash":
            return hash_cmd.execute(parsed_args)
        if parsed_args.command == "tree":
            return tree_cmd.execute(parsed_args)
        print(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130
    except Exception as e:
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        else:
            print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
