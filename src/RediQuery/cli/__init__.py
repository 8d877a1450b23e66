"""CLI package for RediQuery.

Contains the click command definitions, the command runner, and factory
functions for building the client from configuration.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from RediQuery.cli.runner import CommandRunner
from RediQuery.cli.ui import cli


def main() -> None:
    """Run RediQuery CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
