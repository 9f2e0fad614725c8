"""Request signing for the Netstorage HTTP API.

Every request carries three headers:

    X-Akamai-ACS-Action:    version=1&action=upload
    X-Akamai-ACS-Auth-Data: 5, 0.0.0.0, 0.0.0.0, <unix time>, <unique id>, <key name>
    X-Akamai-ACS-Auth-Sign: base64(HMAC-SHA256(secret, <sign string>))

where the sign string is

    <auth data>/<storage path>\\nx-akamai-acs-action:<action>\\n

The same action string is used for PUT and DELETE; the HTTP method tells them apart.
Both IP fields are the 0.0.0.0 wildcard. Signatures are only as fresh as the
timestamp, so two requests in the same second for the same path sign identically.
"""

import base64
import hashlib
import hmac
from dataclasses import dataclass
from typing import final

ACTION = "version=1&action=upload"
AUTH_VERSION = 5
WILDCARD_IP = "0.0.0.0"  # noqa: S104

ACTION_HEADER = "X-Akamai-ACS-Action"
AUTH_DATA_HEADER = "X-Akamai-ACS-Auth-Data"
AUTH_SIGN_HEADER = "X-Akamai-ACS-Auth-Sign"


@final
@dataclass(frozen=True)
class AuthHeaders:
    action: str
    auth_data: str
    signature: str

    def as_headers(self) -> dict[str, str]:
        return {
            ACTION_HEADER: self.action,
            AUTH_DATA_HEADER: self.auth_data,
            AUTH_SIGN_HEADER: self.signature,
        }


def auth_data(key_name: str, unique_id: str, unix_time: int) -> str:
    return (
        f"{AUTH_VERSION}, {WILDCARD_IP}, {WILDCARD_IP}, {unix_time}, {unique_id}, {key_name}"
    )


def sign(
    key_name: str, secret: str, unique_id: str, storage_path: str, unix_time: int
) -> AuthHeaders:
    """Compute the auth headers for one request. Pure, no clock access."""
    data = auth_data(key_name, unique_id, unix_time)
    message = f"{data}/{storage_path}\nx-akamai-acs-action:{ACTION}\n"
    digest = hmac.new(secret.encode(), message.encode(), hashlib.sha256).digest()
    return AuthHeaders(
        action=ACTION,
        auth_data=data,
        signature=base64.b64encode(digest).decode("ascii"),
    )
