"""CLI command modules for templatehash."""

from . import hash_cmd, tree_cmd

__all__ = [
    "hash_cmd",
    "tree_cmd",
]
