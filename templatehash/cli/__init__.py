"""Command line interface for templatehash.

This package contains the CLI commands for computing fingerprints from the
command line.
"""

# CLI modules are typically imported on-demand to avoid startup overhead
__all__ = []
