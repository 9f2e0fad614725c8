import io
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from sitedeploy.config import S3Config
from sitedeploy.exceptions import UnseekableStreamError
from sitedeploy.s3 import S3Output


class _SinglePassStream(io.RawIOBase):
    def readable(self):
        return True

    def seekable(self):
        return False


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def output(client):
    return S3Output("www.example.com", client)


def test_put_reader_puts_public_object(output, client):
    body = io.BytesIO(b"body {}")

    output.put_reader("css/main.css", body, "text/css; charset=utf-8")

    client.put_object.assert_called_once_with(
        Bucket="www.example.com",
        Key="css/main.css",
        Body=body,
        ContentType="text/css; charset=utf-8",
        ACL="public-read",
    )


def test_put_reader_stores_under_prefix_only(output, client):
    output.set_prefix("releases/42")

    output.put_reader("index.html", io.BytesIO(b""), "text/html; charset=utf-8")

    key = client.put_object.call_args.kwargs["Key"]
    assert key == "releases/42/index.html"
    assert key != "index.html"


def test_put_reader_rejects_unseekable_stream(output, client):
    with pytest.raises(UnseekableStreamError, match="seekable"):
        output.put_reader("index.html", _SinglePassStream(), "text/html")

    client.put_object.assert_not_called()


def test_client_errors_propagate_unchanged(output, client):
    error = ClientError({"Error": {"Code": "AccessDenied", "Message": "nope"}}, "PutObject")
    client.put_object.side_effect = error

    with pytest.raises(ClientError) as exc_info:
        output.put_reader("index.html", io.BytesIO(b""), "text/html")

    assert exc_info.value is error


def test_delete_removes_prefixed_key(output, client):
    output.set_prefix("v2")

    output.delete("old.html")

    client.delete_object.assert_called_once_with(Bucket="www.example.com", Key="v2/old.html")


def test_url_for_is_pure(output, client):
    assert output.url_for("posts/first") == "http://www.example.com/posts/first.json"
    output.set_prefix("v2")
    assert output.url_for("posts/first") == "http://www.example.com/v2/posts/first.json"
    assert output.url_for("posts/first") == output.url_for("posts/first")
    assert client.method_calls == []


def test_from_config_builds_client_from_session():
    config = S3Config(
        bucket="site",
        region="eu-west-1",
        profile="deploy",
        endpoint_url="http://localhost:9000",
    )
    with patch("sitedeploy.s3.boto3.Session") as mock_session:
        mock_client = MagicMock()
        mock_session.return_value.client.return_value = mock_client

        output = S3Output.from_config(config)

    mock_session.assert_called_once_with(profile_name="deploy", region_name="eu-west-1")
    mock_session.return_value.client.assert_called_once_with(
        "s3", endpoint_url="http://localhost:9000"
    )
    assert output.bucket == "site"
    assert output.prefix == ""
    output.delete("x")
    mock_client.delete_object.assert_called_once_with(Bucket="site", Key="x")
