import logging
import time
from typing import BinaryIO

import requests

from sitedeploy.exceptions import UnexpectedResponseError
from sitedeploy.netstorage.auth import sign
from sitedeploy.output import join_path

logger = logging.getLogger(__name__)


def dump_response(response: requests.Response) -> str:
    """Render status line, headers and body the way they came over the wire."""
    lines = [f"HTTP/1.1 {response.status_code} {response.reason or ''}".rstrip()]
    lines.extend(f"{name}: {value}" for name, value in response.headers.items())
    return "\r\n".join(lines) + "\r\n\r\n" + response.text


class NetstorageOutput:
    """Uploads to Akamai Netstorage over its signed HTTP API.

    Objects live at http://{host}/{folder}/{prefix}/{key}. Every request is signed
    with the upload key name and secret; the storage path doubles as the request's
    unique id.
    """

    def __init__(  # noqa: PLR0913
        self,
        host: str,
        folder: str,
        key_name: str,
        secret: str,
        base_url: str = "",
        prefix: str = "",
        session: requests.Session | None = None,
    ) -> None:
        self.host = host
        self.folder = folder
        self.key_name = key_name
        self.secret = secret
        self.base_url = base_url
        self.prefix = prefix
        self._session = session or requests.Session()

    def set_prefix(self, prefix: str) -> None:
        self.prefix = prefix

    def url_for(self, key: str) -> str:
        return f"{self.base_url}/{join_path(self.prefix, key)}.json"

    def storage_path(self, key: str) -> str:
        return join_path(self.folder, self.prefix, key)

    def _headers(self, storage_path: str) -> dict[str, str]:
        auth = sign(self.key_name, self.secret, storage_path, storage_path, int(time.time()))
        return auth.as_headers()

    def _send(
        self, method: str, key: str, body: BinaryIO | None = None, content_type: str | None = None
    ) -> str:
        path = self.storage_path(key)
        headers = self._headers(path)
        if content_type is not None:
            headers["Content-Type"] = content_type
        response = self._session.request(
            method, f"http://{self.host}/{path}", data=body, headers=headers
        )
        with response:
            if response.status_code != requests.codes.ok:
                raise UnexpectedResponseError(
                    method, response.status_code, path, dump_response(response)
                )
        return path

    def put_reader(self, key: str, content: BinaryIO, content_type: str) -> None:
        path = self._send("PUT", key, body=content, content_type=content_type)
        logger.info("output: put %s", path)

    def delete(self, key: str) -> None:
        path = self._send("DELETE", key)
        logger.info("output: delete %s", path)
