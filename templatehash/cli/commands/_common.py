"""Helpers shared by the fingerprint commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from templatehash.fingerprint.config import FingerprintConfig

if TYPE_CHECKING:
    import argparse


def add_worker_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--workers",
        type=int,
        help="Number of hashing threads (default: CPU count or configured value)",
    )


def load_config(args: argparse.Namespace) -> FingerprintConfig:
    """Load configuration and apply command line overrides."""
    config = FingerprintConfig.load(config_path=args.config)
    if config.debug:
        logging.getLogger("templatehash").setLevel(logging.DEBUG)
    return config


def report_failure(command: str, error: Exception, verbose: bool) -> int:
    print(f"{command} failed: {error}")  # noqa: T201
    if verbose:
        import traceback

        traceback.print_exc()
    return 1
