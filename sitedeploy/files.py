import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, final

from sitedeploy.exceptions import SiteRootError

logger = logging.getLogger(__name__)

ENTRY_POINT_SUFFIX = ".html"
FALLBACK_CONTENT_TYPE = "application/octet-stream"
CHARSET_SUFFIX = "; charset=utf-8"


@final
@dataclass(frozen=True)
class SiteFile:
    """A file found under the deployment root, with its key relative to that root."""

    path: Path
    key: str

    @property
    def is_entry_point(self) -> bool:
        return self.key.endswith(ENTRY_POINT_SUFFIX)

    @property
    def content_type(self) -> str:
        return content_type_for(self.key)


def walk(root: Path | str) -> list[SiteFile]:
    """List every regular file under root in lexical path order.

    Keys are the POSIX form of the path relative to root, so the same file
    always maps to the same key from one run to the next.
    """
    root = Path(root)
    if not root.is_dir():
        raise SiteRootError(f"Local folder {root} does not exist or is not a directory")

    files = [
        SiteFile(path=file_path, key=file_path.relative_to(root).as_posix())
        for file_path in sorted(root.rglob("*"))
        if file_path.is_file()
    ]
    logger.debug("Found %d files under %s", len(files), root)
    return files


def content_type_for(key: str) -> str:
    mimetype, _ = mimetypes.guess_type(key, strict=False)
    return (mimetype or FALLBACK_CONTENT_TYPE) + CHARSET_SUFFIX


def open_for_upload(path: Path) -> BinaryIO:
    return path.open("rb")
