"""Command runner for coordinating CLI execution.

Manages logging configuration, client lifecycle, JSON output and error
handling for command execution.
"""

from __future__ import annotations

import json
from typing import Any, Callable

import click
from redis.exceptions import RedisError

from RediQuery.cli import factories
from RediQuery.client import SearchClient
from RediQuery.config import AppConfig
from RediQuery.core.errors import RediQueryError
from RediQuery.utils.log import configure_logging, log


def render_json(result: Any) -> str:
    """Render a command result as indented JSON."""
    return json.dumps(result, indent=2, ensure_ascii=False, default=str)


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run(self, action: str, operation: Callable[[SearchClient], Any]) -> None:
        """Run one client operation and print its result.

        Args:
            action: The CLI command name (e.g., 'search').
            operation: Callable receiving the client and returning a
                JSON-serializable result.

        Raises:
            click.ClickException: When the engine or connection fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        try:
            with factories.create_client(self.config) as client:
                result = operation(client)
        except (RediQueryError, RedisError) as e:
            log.error("%s failed: %s", action, e)
            raise click.ClickException(str(e)) from e

        click.echo(render_json(result))
