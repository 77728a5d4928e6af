"""Tree command - Show per-file digests and the resulting directory fingerprint."""
# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
from pathlib import Path

from templatehash.cli.commands._common import add_worker_argument, load_config, report_failure
from templatehash.core.errors import FingerprintError
from templatehash.fingerprint.directory import digest_set_fingerprint, require_directory
from templatehash.fingerprint.scheduler import hash_tree


def add_arguments(parser: argparse.ArgumentParser) -> None:
    """Add command-specific arguments."""
    parser.add_argument(
        "directory",
        type=Path,
        metavar="DIRECTORY",
        help="Directory to traverse recursively",
    )

    add_worker_argument(parser)

    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable JSON output",
    )


def execute(args: argparse.Namespace) -> int:
    """Execute the tree command."""
    try:
        config = load_config(args)
        workers = args.workers if args.workers is not None else config.max_workers

        directory = require_directory(args.directory)
        digests = hash_tree(directory, max_workers=workers, algorithm=config.algorithm)
        fingerprint = digest_set_fingerprint(digests, algorithm=config.algorithm)

        if args.json:
            payload = {
                "directory": str(args.directory),
                "algorithm": config.algorithm,
                "fingerprint": fingerprint,
                "files": digests.to_dict(),
            }
            print(json.dumps(payload, indent=2))
        else:
            for entry in digests.sorted_digests():
                print(f"{entry.hexdigest}  {entry.posix_path}")
            print()
            print(f"Files:       {len(digests)}")
            print(f"Fingerprint: {fingerprint}")
        return 0
    except (FingerprintError, ValueError) as error:
        return report_failure("Tree", error, args.verbose)
