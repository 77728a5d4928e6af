"""Hash command - Fingerprint a template definition made of files and directories."""
# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
from pathlib import Path

from templatehash.cli.commands._common import add_worker_argument, load_config, report_failure
from templatehash.core.errors import FingerprintError
from templatehash.fingerprint.template import hash_paths


def add_arguments(parser: argparse.ArgumentParser) -> None:
    """Add command-specific arguments."""
    parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        metavar="PATH",
        help="Files or directories, combined in the order given",
    )

    add_worker_argument(parser)

    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable JSON output",
    )


def execute(args: argparse.Namespace) -> int:
    """Execute the hash command."""
    try:
        config = load_config(args)
        workers = args.workers if args.workers is not None else config.max_workers

        fingerprint = hash_paths(
            *args.paths,
            max_workers=workers,
            algorithm=config.algorithm,
        )

        if args.json:
            payload = {
                "fingerprint": fingerprint,
                "algorithm": config.algorithm,
                "paths": [str(path) for path in args.paths],
            }
            print(json.dumps(payload, indent=2))
        else:
            print(fingerprint)
        return 0
    except (FingerprintError, ValueError) as error:
        return report_failure("Hash", error, args.verbose)
