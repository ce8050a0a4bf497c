"""Kamailio RPC result records.

These mirror the structures printed by the ``uac`` and ``usrloc`` modules.
Missing or null members fall back to zero values and unknown members are ignored,
matching how the server adds fields across releases.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class KamailioModel(BaseModel):
    """Base model for Kamailio result records.

    Wire names are set with explicit aliases; attributes use snake_case.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _null_members_take_defaults(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class RegistrationInfo(KamailioModel):
    """One remote registration as reported by ``uac.reg_info``."""

    local_uuid: str = Field(default="", alias="l_uuid")
    local_username: str = Field(default="", alias="l_username")
    local_domain: str = Field(default="", alias="l_domain")
    remote_username: str = Field(default="", alias="r_username")
    remote_domain: str = Field(default="", alias="r_domain")
    realm: str = ""
    auth_username: str = ""
    auth_password: str = ""
    auth_proxy: str = ""
    # Raw: the server reports either a number or a string here.
    expires: Any = None
    flags: int = 0
    diff_expires: int = 0
    timer_expires: int = 0


class ContactInfo(KamailioModel):
    address: str = Field(default="", alias="Address")
    expires: Any = Field(default=None, alias="Expires")
    q: int = Field(default=0, alias="Q")
    call_id: str = Field(default="", alias="Call-ID")
    cseq: int = Field(default=0, alias="CSeq")
    user_agent: str = Field(default="", alias="User-Agent")
    received: str = Field(default="", alias="Received")
    path: str = Field(default="", alias="Path")
    state: str = Field(default="", alias="State")
    flags: int = Field(default=0, alias="Flags")
    cflags: int = Field(default=0, alias="CFlags")
    socket: str = Field(default="", alias="Socket")
    methods: int = Field(default=0, alias="Methods")
    ruid: str = Field(default="", alias="Ruid")
    instance: str = Field(default="", alias="Instance")
    reg_id: int = Field(default=0, alias="Reg-Id")
    server_id: int = Field(default=0, alias="Server-Id")
    tcpconn_id: int = Field(default=0, alias="Tcpconn-Id")
    keepalive: int = Field(default=0, alias="Keepalive")
    last_keepalive: int = Field(default=0, alias="Last-Keepalive")
    ka_roundtrip: int = Field(default=0, alias="KA-Roundtrip")
    last_modified: int = Field(default=0, alias="Last-Modified")


class ULContact(KamailioModel):
    contact: ContactInfo = Field(default_factory=ContactInfo, alias="Contact")


class ULSingle(KamailioModel):
    """Result of ``ul.lookup``: one address of record and its contacts."""

    aor: str = Field(default="", alias="AoR")
    contacts: list[ULContact] = Field(default_factory=list, alias="Contacts")


class AorInfo(KamailioModel):
    aor: str = Field(default="", alias="AoR")
    hash_id: int = Field(default=0, alias="HashID")
    contacts: list[ULContact] = Field(default_factory=list, alias="Contacts")


class ULAor(KamailioModel):
    info: AorInfo = Field(default_factory=AorInfo, alias="Info")


class DomainStats(KamailioModel):
    records: int = Field(default=0, alias="Records")
    max_slots: int = Field(default=0, alias="Max-Slots")


class DomainInfo(KamailioModel):
    domain: str = Field(default="", alias="Domain")
    size: int = Field(default=0, alias="Size")
    aors: list[ULAor] = Field(default_factory=list, alias="AoRs")
    stats: DomainStats = Field(default_factory=DomainStats, alias="Stats")


class ULDomain(KamailioModel):
    domain: DomainInfo = Field(default_factory=DomainInfo, alias="Domain")


class ULDump(KamailioModel):
    """Result of ``ul.dump``: every usrloc domain with its records."""

    domains: list[ULDomain] = Field(default_factory=list, alias="Domains")


__all__ = [
    "AorInfo",
    "ContactInfo",
    "DomainInfo",
    "DomainStats",
    "KamailioModel",
    "RegistrationInfo",
    "ULAor",
    "ULContact",
    "ULDomain",
    "ULDump",
    "ULSingle",
]
