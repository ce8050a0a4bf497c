import json
from typing import Any

import httpx
import pytest

from kamrpc.config.settings import ClientSettings
from kamrpc.kamailio.api import OK, KamailioAPI
from kamrpc.kamailio.types import RegistrationInfo, ULDump, ULSingle
from kamrpc.rpc.client import JSONRPCHttpClient
from kamrpc.rpc.errors import DecodeError, ProtocolError

CONTACT = {
    "Contact": {
        "Address": "sip:alice@192.0.2.10:5060;transport=udp",
        "Expires": 3587,
        "Q": -1,
        "Call-ID": "a84b4c76e66710",
        "CSeq": 2,
        "User-Agent": "Linphone/5.2",
        "Received": "[not set]",
        "Path": "[not set]",
        "State": "CS_NEW",
        "Flags": 0,
        "CFlags": 0,
        "Socket": "udp:192.0.2.1:5060",
        "Methods": 8159,
        "Ruid": "uloc-5f1c-1",
        "Instance": "[not set]",
        "Reg-Id": 0,
        "Server-Id": 0,
        "Tcpconn-Id": -1,
        "Keepalive": 0,
        "Last-Keepalive": 1700000000,
        "KA-Roundtrip": 0,
        "Last-Modified": 1700000000,
    }
}


class FakeKamailio:
    """Answers every request with a canned result and records what was asked."""

    def __init__(self, result: Any = None) -> None:
        self.result = result
        self.requests: list[dict[str, Any]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": self.result})


def _api(server: FakeKamailio) -> KamailioAPI:
    return KamailioAPI(JSONRPCHttpClient("http://kamailio.test/RPC", transport=httpx.MockTransport(server)))


def test_core_echo_returns_decoded_list() -> None:
    server = FakeKamailio(["ping"])
    with _api(server) as api:
        assert api.core_echo(["ping"]) == ["ping"]

    assert server.requests[0]["method"] == "core.echo"
    assert server.requests[0]["params"] == ["ping"]


@pytest.mark.parametrize(
    ("wrapper", "method"),
    [
        ("uac_reg_enable", "uac.reg_enable"),
        ("uac_reg_disable", "uac.reg_disable"),
        ("uac_reg_reload", "uac.reg_reload"),
        ("uac_reg_refresh", "uac.reg_refresh"),
        ("domain_reload", "domain.reload"),
    ],
)
def test_commands_report_ok_for_null_result(wrapper: str, method: str) -> None:
    server = FakeKamailio(None)
    with _api(server) as api:
        assert getattr(api, wrapper)(["l_uuid", "carrier-1"]) == OK

    assert server.requests[0]["method"] == method
    assert server.requests[0]["params"] == ["l_uuid", "carrier-1"]


def test_commands_discard_any_payload() -> None:
    with _api(FakeKamailio({"unexpected": "payload"})) as api:
        assert api.domain_reload() == "OK"


def test_params_default_to_empty() -> None:
    server = FakeKamailio(None)
    with _api(server) as api:
        api.uac_reg_reload()

    assert server.requests[0]["params"] == []


def test_uac_reg_info_decodes_registration() -> None:
    server = FakeKamailio(
        {
            "l_uuid": "carrier-1",
            "l_username": "trunk",
            "l_domain": "pbx.example.com",
            "r_username": "4930123",
            "r_domain": "sip.carrier.net",
            "realm": "carrier.net",
            "auth_username": "4930123",
            "auth_password": "secret",
            "auth_proxy": "sip:proxy.carrier.net",
            "expires": 360,
            "flags": 20,
            "diff_expires": 180,
            "timer_expires": 1700000180,
            "reg_delay": 0,
        }
    )
    with _api(server) as api:
        info = api.uac_reg_info(["l_uuid", "carrier-1"])

    assert isinstance(info, RegistrationInfo)
    assert info.local_uuid == "carrier-1"
    assert info.remote_domain == "sip.carrier.net"
    assert info.expires == 360
    assert info.flags == 20
    assert info.timer_expires == 1700000180


def test_ul_dump_decodes_nested_domains() -> None:
    server = FakeKamailio(
        {
            "Domains": [
                {
                    "Domain": {
                        "Domain": "location",
                        "Size": 1024,
                        "AoRs": [{"Info": {"AoR": "alice", "HashID": 3127538123, "Contacts": [CONTACT]}}],
                        "Stats": {"Records": 1, "Max-Slots": 1},
                    }
                }
            ]
        }
    )
    with _api(server) as api:
        dump = api.ul_dump()

    assert isinstance(dump, ULDump)
    domain = dump.domains[0].domain
    assert domain.domain == "location"
    assert domain.size == 1024
    assert domain.stats.max_slots == 1
    aor = domain.aors[0].info
    assert aor.aor == "alice"
    assert aor.hash_id == 3127538123
    contact = aor.contacts[0].contact
    assert contact.call_id == "a84b4c76e66710"
    assert contact.user_agent == "Linphone/5.2"
    assert contact.tcpconn_id == -1
    assert contact.last_modified == 1700000000


def test_ul_lookup_decodes_single_aor() -> None:
    server = FakeKamailio({"AoR": "alice@example.com", "Contacts": [CONTACT, CONTACT]})
    with _api(server) as api:
        single = api.ul_lookup(["location", "alice@example.com"])

    assert isinstance(single, ULSingle)
    assert single.aor == "alice@example.com"
    assert len(single.contacts) == 2
    assert single.contacts[0].contact.socket == "udp:192.0.2.1:5060"
    assert server.requests[0]["params"] == ["location", "alice@example.com"]


def test_missing_members_take_zero_values() -> None:
    with _api(FakeKamailio({"AoR": "bob"})) as api:
        single = api.ul_lookup(["location", "bob"])

    assert single.contacts == []


def test_null_members_take_zero_values() -> None:
    server = FakeKamailio(
        {
            "AoR": "carol",
            "Contacts": [{"Contact": {"Address": None, "CSeq": None, "Call-ID": "c1"}}, {"Contact": None}],
        }
    )
    with _api(server) as api:
        single = api.ul_lookup(["location", "carol"])

    first, second = (entry.contact for entry in single.contacts)
    assert first.address == ""
    assert first.cseq == 0
    assert first.call_id == "c1"
    assert second.call_id == ""

    with _api(FakeKamailio({"AoR": "dave", "Contacts": None})) as api:
        assert api.ul_lookup(["location", "dave"]).contacts == []


@pytest.mark.parametrize(
    ("wrapper", "result"),
    [
        ("core_echo", {"not": "a list"}),
        ("uac_reg_info", None),
        ("ul_dump", {"Domains": "nope"}),
        ("ul_lookup", {"Contacts": [{"Contact": {"CSeq": "not-a-number"}}]}),
    ],
)
def test_unexpected_result_shape_is_a_decode_error(wrapper: str, result: Any) -> None:
    with _api(FakeKamailio(result)) as api, pytest.raises(DecodeError):
        getattr(api, wrapper)([])


def test_errors_propagate_unchanged() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        return httpx.Response(
            200, json={"jsonrpc": "2.0", "id": body["id"], "error": {"code": 404, "message": "Not found"}}
        )

    api = KamailioAPI(JSONRPCHttpClient("http://kamailio.test/RPC", transport=httpx.MockTransport(handler)))
    with api, pytest.raises(ProtocolError) as exc_info:
        api.uac_reg_enable(["l_uuid", "unknown"])

    assert exc_info.value.code == 404


def test_from_settings_uses_configured_endpoint() -> None:
    settings = ClientSettings(endpoint="https://sbc.example.com:5061/RPC", skip_tls_verify=True, timeout_seconds=2)
    with KamailioAPI.from_settings(settings) as api:
        assert api.client.endpoint == "https://sbc.example.com:5061/RPC"
