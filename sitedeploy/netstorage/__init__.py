from .auth import AuthHeaders, sign
from .output import NetstorageOutput

__all__ = [
    "AuthHeaders",
    "NetstorageOutput",
    "sign",
]
