"""Kamailio-specific RPC methods and result records."""

from kamrpc.kamailio.api import OK, KamailioAPI
from kamrpc.kamailio.types import RegistrationInfo, ULAor, ULContact, ULDomain, ULDump, ULSingle

__all__ = [
    "OK",
    "KamailioAPI",
    "RegistrationInfo",
    "ULAor",
    "ULContact",
    "ULDomain",
    "ULDump",
    "ULSingle",
]
