"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands to the
runner. Every command prints its result as JSON.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from RediQuery.cli.runner import CommandRunner
from RediQuery.config import load_config


@click.group(help="RediQuery: query a RediSearch index from the terminal.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/default.yml"),
    show_default=True,
    help="Path to YAML config file (built-in defaults when missing).",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config,
    so the Redis password can be kept out of the YAML file.
    """
    load_dotenv()
    ctx.obj = CommandRunner(load_config(config_path))


@cli.command("info")
@click.argument("index")
@click.pass_obj
def info_cmd(runner: CommandRunner, index: str) -> None:
    """Print information and statistics on INDEX."""
    runner.run("info", lambda client: client.info(index))


@cli.command("search")
@click.argument("index")
@click.argument("query")
@click.option("--offset", type=int, default=0, show_default=True, help="First hit to return.")
@click.option("--num", type=int, default=None, help="Hits to return (default: search.default_limit).")
@click.option("--nocontent", is_flag=True, help="Return ids only.")
@click.option("--withscores", is_flag=True, help="Include relevance scores.")
@click.option("--verbatim", is_flag=True, help="Disable stemming of query terms.")
@click.option("--return", "return_fields", multiple=True, help="Field to return (repeatable).")
@click.option("--sortby", nargs=2, type=str, default=None, help="FIELD ASC|DESC")
@click.pass_obj
def search_cmd(
    runner: CommandRunner,
    index: str,
    query: str,
    offset: int,
    num: int | None,
    nocontent: bool,
    withscores: bool,
    verbatim: bool,
    return_fields: tuple[str, ...],
    sortby: tuple[str, str] | None,
) -> None:
    """Search INDEX with QUERY."""
    limit = num if num is not None else runner.config.search.default_limit
    opts: dict = {
        "nocontent": nocontent,
        "withscores": withscores,
        "verbatim": verbatim,
        "limit": [str(offset), str(limit)],
    }
    if return_fields:
        opts["return"] = [str(len(return_fields)), *return_fields]
    if sortby:
        opts["sortby"] = list(sortby)
    runner.run("search", lambda client: client.search(index, query, **opts))


@cli.command("get")
@click.argument("index")
@click.argument("doc_id")
@click.pass_obj
def get_cmd(runner: CommandRunner, index: str, doc_id: str) -> None:
    """Print the document DOC_ID (null when missing)."""
    runner.run("get", lambda client: client.get(index, doc_id))


@cli.command("explain")
@click.argument("index")
@click.argument("query")
@click.pass_obj
def explain_cmd(runner: CommandRunner, index: str, query: str) -> None:
    """Print the execution plan for QUERY."""
    runner.run("explain", lambda client: client.explain(index, query))


@cli.command("tagvals")
@click.argument("index")
@click.argument("field")
@click.pass_obj
def tagvals_cmd(runner: CommandRunner, index: str, field: str) -> None:
    """Print the distinct tags of tag FIELD."""
    runner.run("tagvals", lambda client: client.tag_vals(index, field))


@cli.command("sugget")
@click.argument("key")
@click.argument("prefix")
@click.option("--fuzzy", is_flag=True, help="Fuzzy prefix matching.")
@click.option("--withscores", is_flag=True, help="Include suggestion scores.")
@click.option("--withpayloads", is_flag=True, help="Include suggestion payloads.")
@click.option("--max", "max_results", type=int, default=None, help="Maximum suggestions.")
@click.pass_obj
def sugget_cmd(
    runner: CommandRunner,
    key: str,
    prefix: str,
    fuzzy: bool,
    withscores: bool,
    withpayloads: bool,
    max_results: int | None,
) -> None:
    """Print completion suggestions for PREFIX from dictionary KEY."""
    opts: dict = {"fuzzy": fuzzy, "withscores": withscores, "withpayloads": withpayloads}
    if max_results is not None:
        opts["max"] = [str(max_results)]
    runner.run("sugget", lambda client: client.get_suggestion(key, prefix, **opts))
