import logging
import os
from typing import NoReturn

from botocore.exceptions import BotoCoreError, ClientError
from requests.exceptions import RequestException
from rich.console import Console
from rich.markup import escape

from sitedeploy.backends import create_output
from sitedeploy.config import load_config
from sitedeploy.deploy import Deployment, deploy_directory
from sitedeploy.exceptions import SiteDeployError
from sitedeploy.output import Output

console = Console()
logger = logging.getLogger(__name__)

DEPLOY_ERRORS = (SiteDeployError, OSError, RequestException, BotoCoreError, ClientError)


def _handle_error(error: Exception) -> NoReturn:
    logger.error("Aborting: %s", error)
    if os.getenv("SITEDEPLOY_DEBUG", "0") == "1":
        raise error
    console.print(
        f"[bold red]✗ {type(error).__name__}:[/bold red] {escape(str(error))}",
        highlight=False,
        soft_wrap=True,
    )
    raise SystemExit(1) from None


def _output(prefix: str) -> Output:
    try:
        output = create_output(load_config())
    except DEPLOY_ERRORS as e:
        _handle_error(e)
    output.set_prefix(prefix)
    return output


def run_deploy(local_folder: str, prefix: str) -> Deployment:
    output = _output(prefix)
    console.print(f"Deploying [bold]{escape(local_folder)}[/bold] to {type(output).__name__}")
    try:
        with console.status("Uploading..."):
            deployment = deploy_directory(output, local_folder)
    except DEPLOY_ERRORS as e:
        _handle_error(e)

    console.print(
        f"[bold green]✓[/bold green] Uploaded {len(deployment.assets)} assets "
        f"and {len(deployment.entry_points)} pages",
        highlight=False,
    )
    return deployment


def run_delete(keys: tuple[str, ...], prefix: str) -> None:
    output = _output(prefix)
    for key in keys:
        try:
            output.delete(key)
        except DEPLOY_ERRORS as e:
            _handle_error(e)
        console.print(f"[red]-[/red] {escape(key)}", highlight=False)


def run_urls(keys: tuple[str, ...], prefix: str) -> None:
    output = _output(prefix)
    for key in keys:
        console.print(output.url_for(key), markup=False, highlight=False, soft_wrap=True)
