from dataclasses import dataclass
from typing import BinaryIO

import pytest

from sitedeploy.output import join_path


@dataclass
class Call:
    op: str
    key: str
    path: str
    content_type: str | None = None


class FakeOutput:
    """In-memory Output that keeps what was put and can be told to fail on a key."""

    def __init__(self) -> None:
        self.prefix = ""
        self.objects: dict[str, tuple[bytes, str]] = {}
        self.calls: list[Call] = []
        self.failures: dict[str, BaseException] = {}

    def set_prefix(self, prefix: str) -> None:
        self.prefix = prefix

    def fail_on(self, key: str, error: BaseException) -> None:
        self.failures[key] = error

    def put_reader(self, key: str, content: BinaryIO, content_type: str) -> None:
        path = join_path(self.prefix, key)
        self.calls.append(Call("put", key, path, content_type))
        if key in self.failures:
            raise self.failures[key]
        self.objects[path] = (content.read(), content_type)

    def delete(self, key: str) -> None:
        path = join_path(self.prefix, key)
        self.calls.append(Call("delete", key, path))
        if key in self.failures:
            raise self.failures[key]
        self.objects.pop(path, None)

    def url_for(self, key: str) -> str:
        return f"http://fake/{join_path(self.prefix, key)}.json"

    @property
    def put_keys(self) -> list[str]:
        return [call.key for call in self.calls if call.op == "put"]


@pytest.fixture
def fake_output():
    return FakeOutput()


@pytest.fixture
def site_dir(tmp_path):
    """A small site whose lexical order interleaves pages and assets."""
    root = tmp_path / "site"
    files = {
        "about.html": "<html>about</html>",
        "css/main.css": "body {}",
        "img/logo.png": "png",
        "index.html": "<html>index</html>",
        "js/app.js": "console.log(1)",
        "posts/first.html": "<html>first</html>",
        "data/feed.json": "{}",
    }
    for key, text in files.items():
        path = root / key
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
    return root
