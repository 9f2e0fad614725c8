"""Two-phase publishing of a site to an Output.

Pages link to images, scripts and stylesheets, so every non-HTML file is
uploaded before the first HTML file. Once a page is reachable at its new
location, everything it references already resolves.

The ordering is a barrier, not a transaction: the first error stops the run
and whatever was already uploaded stays uploaded.

    NOT_STARTED -> UPLOADING_ASSETS -> UPLOADING_ENTRY_POINTS -> DONE
                         |                      |
                         +-------> FAILED <-----+
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from sitedeploy.exceptions import DeploymentStateError
from sitedeploy.files import SiteFile, open_for_upload, walk
from sitedeploy.output import Output

logger = logging.getLogger(__name__)


class DeployState(Enum):
    NOT_STARTED = "not_started"
    UPLOADING_ASSETS = "uploading_assets"
    UPLOADING_ENTRY_POINTS = "uploading_entry_points"
    DONE = "done"
    FAILED = "failed"


TERMINAL_STATES = frozenset({DeployState.DONE, DeployState.FAILED})


def partition(files: Iterable[SiteFile]) -> tuple[list[SiteFile], list[SiteFile]]:
    """Split files into (assets, entry points), each in discovery order."""
    assets: list[SiteFile] = []
    entry_points: list[SiteFile] = []
    for site_file in files:
        (entry_points if site_file.is_entry_point else assets).append(site_file)
    return assets, entry_points


class Deployment:
    """Uploads one set of files to an output, assets first, one file at a time."""

    def __init__(
        self,
        output: Output,
        files: Sequence[SiteFile],
        opener: Callable[[Path], BinaryIO] = open_for_upload,
    ) -> None:
        self.output = output
        self.assets, self.entry_points = partition(files)
        self.opener = opener
        self.state = DeployState.NOT_STARTED
        self.uploaded: list[str] = []
        self.error: BaseException | None = None

    def run(self) -> None:
        if self.state is not DeployState.NOT_STARTED:
            raise DeploymentStateError(f"Deployment already ran (state: {self.state.value})")

        try:
            self.state = DeployState.UPLOADING_ASSETS
            logger.info("Uploading %d assets", len(self.assets))
            self._upload_all(self.assets)

            self.state = DeployState.UPLOADING_ENTRY_POINTS
            logger.info("Uploading %d pages", len(self.entry_points))
            self._upload_all(self.entry_points)
        except BaseException as e:
            logger.debug("Deployment failed during %s", self.state.value)
            self.state = DeployState.FAILED
            self.error = e
            raise

        self.state = DeployState.DONE
        logger.info("Deployment finished, %d files uploaded", len(self.uploaded))

    def _upload_all(self, files: Iterable[SiteFile]) -> None:
        for site_file in files:
            with self.opener(site_file.path) as content:
                self.output.put_reader(site_file.key, content, site_file.content_type)
            self.uploaded.append(site_file.key)


def deploy_directory(output: Output, root: Path | str, prefix: str | None = None) -> Deployment:
    """Walk root and publish everything under it to output."""
    if prefix is not None:
        output.set_prefix(prefix)
    deployment = Deployment(output, walk(root))
    deployment.run()
    return deployment
