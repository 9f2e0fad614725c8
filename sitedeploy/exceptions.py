class SiteDeployError(Exception):
    """Base class for errors raised by sitedeploy itself."""


class ConfigError(SiteDeployError):
    """Raised when the environment does not select exactly one usable output."""


class SiteRootError(SiteDeployError):
    """Raised when the local folder to deploy does not exist or is not a directory."""


class UnseekableStreamError(SiteDeployError):
    """Raised when a backend that may rewind the upload body gets a single-pass stream."""


class DeploymentStateError(SiteDeployError):
    """Raised when a deployment is run again after it has finished or failed."""


class UnexpectedResponseError(SiteDeployError):
    """Raised when the remote store answers with anything other than 200 OK."""

    def __init__(self, method: str, status_code: int, path: str, dump: str):
        self.method = method
        self.status_code = status_code
        self.path = path
        self.dump = dump
        verb = "deleting" if method == "DELETE" else "uploading"
        super().__init__(
            f"unexpected response code {status_code} when {verb} {path}. "
            f"Here's a dump of the response:\n{dump}"
        )
