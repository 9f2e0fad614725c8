import logging
import sys
from importlib import metadata
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

import click
from appdirs import user_log_dir
from rich.console import Console
from rich.logging import RichHandler

from sitedeploy.cli.commands import run_delete, run_deploy, run_urls
from sitedeploy.config import prefix_from_env
from sitedeploy.output import escapes_prefix

console = Console()

app_logger = logging.getLogger("sitedeploy")
# Capture everything internally; handlers decide what is shown
app_logger.setLevel(logging.DEBUG)

app_name = "sitedeploy"
log_dir = Path(user_log_dir(app_name))
log_dir.mkdir(parents=True, exist_ok=True)
log_file_path = log_dir / f"{app_name}.log"
file_handler = TimedRotatingFileHandler(
    filename=str(log_file_path), when="D", interval=1, backupCount=7, encoding="utf-8"
)
file_handler.setLevel(logging.DEBUG)
file_formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
file_handler.setFormatter(file_formatter)
app_logger.addHandler(file_handler)

logger = logging.getLogger(__name__)

logging.getLogger("botocore").setLevel(logging.WARNING)
logging.getLogger("boto3").setLevel(logging.WARNING)
logging.getLogger("urllib3").setLevel(logging.WARNING)

prefix_option = click.option(
    "--prefix",
    "-p",
    default=None,
    help="Path placed in front of every key. Defaults to $DEPLOY_PREFIX.",
)


def _resolve_prefix(prefix: str | None) -> str:
    return prefix if prefix is not None else prefix_from_env()


def _validate_keys(
    ctx: click.Context, param: click.Parameter, keys: tuple[str, ...]
) -> tuple[str, ...]:
    for key in keys:
        if escapes_prefix(key):
            raise click.BadParameter(f"{key!r} points outside the prefix", ctx=ctx, param=param)
    return keys


@click.group(invoke_without_command=True)
@click.option(
    "--verbose", "-v", count=True, help="Increase verbosity. -v for INFO, -vv for DEBUG logs."
)
@click.option("--version", is_flag=True, help="Show sitedeploy version.")
@click.pass_context
def cli(ctx: click.Context, verbose: int, version: bool) -> None:
    if version:
        _version()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit(0)

    if verbose > 0:
        console_handler = RichHandler(
            console=console,
            show_time=False,
            show_level=True,
            markup=False,
            tracebacks_suppress=[click],
            rich_tracebacks=True,
        )
        if verbose == 1:
            console_handler.setLevel(logging.INFO)
        elif verbose >= 2:  # noqa: PLR2004
            console_handler.setLevel(logging.DEBUG)

        console.print(f"[italic dim]Logs saved to: {log_file_path}[/]")
        app_logger.addHandler(console_handler)


@click.command()
@click.argument("local_folder", type=click.Path(file_okay=False))
@prefix_option
def deploy(local_folder: str, prefix: str | None) -> None:
    """
    Uploads every file under LOCAL_FOLDER to the configured output.
    Non-HTML files go first, HTML pages last.
    """
    logger.info("Deploying %s", local_folder)
    run_deploy(local_folder, _resolve_prefix(prefix))


@click.command()
@click.argument("keys", nargs=-1, required=True, callback=_validate_keys)
@prefix_option
def delete(keys: tuple[str, ...], prefix: str | None) -> None:
    """Deletes the given keys from the configured output."""
    run_delete(keys, _resolve_prefix(prefix))


@click.command()
@click.argument("keys", nargs=-1, required=True, callback=_validate_keys)
@prefix_option
def url(keys: tuple[str, ...], prefix: str | None) -> None:
    """Prints the diagnostic URL for each key. Makes no network calls."""
    run_urls(keys, _resolve_prefix(prefix))


cli.add_command(deploy)
cli.add_command(delete)
cli.add_command(url)


def _version() -> None:
    console.print(f"sitedeploy version: {metadata.version('sitedeploy')}", highlight=False)
    sys.exit(0)
