import logging
from typing import BinaryIO

import boto3
from botocore.client import BaseClient

from sitedeploy.config import S3Config
from sitedeploy.exceptions import UnseekableStreamError
from sitedeploy.output import join_path

logger = logging.getLogger(__name__)

PUBLIC_READ = "public-read"


class S3Output:
    """Uploads to an S3 (or S3-compatible) bucket under an optional prefix.

    The upload body must be seekable: botocore rewinds it when it retries a
    request after a connection reset.
    """

    def __init__(self, bucket: str, client: BaseClient, prefix: str = "") -> None:
        self.bucket = bucket
        self.prefix = prefix
        self._s3 = client

    @classmethod
    def from_config(cls, config: S3Config) -> "S3Output":
        session = boto3.Session(profile_name=config.profile, region_name=config.region)
        client = session.client("s3", endpoint_url=config.endpoint_url)
        return cls(config.bucket, client)

    def set_prefix(self, prefix: str) -> None:
        self.prefix = prefix

    def url_for(self, key: str) -> str:
        return f"http://{self.bucket}/{join_path(self.prefix, key)}.json"

    def put_reader(self, key: str, content: BinaryIO, content_type: str) -> None:
        if not content.seekable():
            raise UnseekableStreamError(f"S3 uploads need a seekable stream, got one for {key}")
        filename = join_path(self.prefix, key)
        self._s3.put_object(
            Bucket=self.bucket,
            Key=filename,
            Body=content,
            ContentType=content_type,
            ACL=PUBLIC_READ,
        )
        logger.info("output: put %s", filename)

    def delete(self, key: str) -> None:
        filename = join_path(self.prefix, key)
        self._s3.delete_object(Bucket=self.bucket, Key=filename)
        logger.info("output: delete %s", filename)
