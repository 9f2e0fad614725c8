import os
from collections.abc import Mapping
from dataclasses import dataclass

from sitedeploy.exceptions import ConfigError

DEFAULT_S3_REGION = "ap-southeast-2"


@dataclass(frozen=True, kw_only=True)
class S3Config:
    """S3 (or S3-compatible) bucket to publish into.

    Credentials follow the standard boto3 resolution chain (environment variables,
    shared credentials file, SSO, instance role). `profile` and `region` are optional
    overrides; `endpoint_url` points the client at a non-AWS S3-compatible store.

    Environment:
        S3_BUCKET        bucket name (selects this backend)
        S3_REGION        region, falls back to AWS_REGION, then ap-southeast-2
        AWS_PROFILE      named profile
        S3_ENDPOINT_URL  custom endpoint
    """

    bucket: str
    region: str = DEFAULT_S3_REGION
    profile: str | None = None
    endpoint_url: str | None = None


@dataclass(frozen=True, kw_only=True)
class NetstorageConfig:
    """Akamai Netstorage upload account.

    Environment:
        NETSTORAGE_HOST             upload host (selects this backend)
        NETSTORAGE_FOLDER           CP code / root folder on the host
        NETSTORAGE_UPLOAD_KEY_NAME  upload account key name
        NETSTORAGE_UPLOAD_SECRET    upload account secret
        NETSTORAGE_BASE_URL         public base URL used for diagnostic links
    """

    host: str
    key_name: str
    secret: str
    folder: str = ""
    base_url: str = ""

    def __repr__(self) -> str:
        return (
            f"NetstorageConfig(host={self.host!r}, key_name={self.key_name!r}, "
            f"secret='***', folder={self.folder!r}, base_url={self.base_url!r})"
        )


OutputConfig = S3Config | NetstorageConfig


def _get(environ: Mapping[str, str], name: str) -> str:
    return environ.get(name, "").strip()


def load_config(environ: Mapping[str, str] | None = None) -> OutputConfig:
    """Select and configure exactly one output from the environment.

    Raises:
        ConfigError: neither or both of S3_BUCKET and NETSTORAGE_HOST are set, or the
            Netstorage credentials are missing.
    """
    if environ is None:
        environ = os.environ

    bucket = _get(environ, "S3_BUCKET")
    host = _get(environ, "NETSTORAGE_HOST")

    if bucket and host:
        raise ConfigError(
            "Both S3_BUCKET and NETSTORAGE_HOST are set. Configure only one output."
        )

    if bucket:
        return S3Config(
            bucket=bucket,
            region=_get(environ, "S3_REGION") or _get(environ, "AWS_REGION") or DEFAULT_S3_REGION,
            profile=_get(environ, "AWS_PROFILE") or None,
            endpoint_url=_get(environ, "S3_ENDPOINT_URL") or None,
        )

    if host:
        key_name = _get(environ, "NETSTORAGE_UPLOAD_KEY_NAME")
        secret = environ.get("NETSTORAGE_UPLOAD_SECRET", "")
        missing = [
            name
            for name, value in [
                ("NETSTORAGE_UPLOAD_KEY_NAME", key_name),
                ("NETSTORAGE_UPLOAD_SECRET", secret),
            ]
            if not value
        ]
        if missing:
            raise ConfigError(f"NETSTORAGE_HOST is set but {', '.join(missing)} not set.")
        return NetstorageConfig(
            host=host,
            key_name=key_name,
            secret=secret,
            folder=_get(environ, "NETSTORAGE_FOLDER"),
            base_url=_get(environ, "NETSTORAGE_BASE_URL").rstrip("/"),
        )

    raise ConfigError("Either a netstorage or s3 output should be configured in the env.")


def prefix_from_env(environ: Mapping[str, str] | None = None) -> str:
    if environ is None:
        environ = os.environ
    return _get(environ, "DEPLOY_PREFIX")
