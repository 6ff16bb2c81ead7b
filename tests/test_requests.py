"""
Tests for request URL and body construction.
"""

import pytest
from upcloud_client.core.errors import InvalidRequestError
from upcloud_client.models import BackupRule, FirewallRule, Label
from upcloud_client.request import (
    AssignIPAddressRequest,
    AttachStorageRequest,
    CloneStorageRequest,
    CreateFirewallRuleRequest,
    CreateServerIPAddress,
    CreateServerRequest,
    CreateServerStorageDevice,
    CreateStorageRequest,
    DeleteFirewallRuleRequest,
    DetachStorageRequest,
    GetFirewallRuleDetailsRequest,
    GetServerDetailsRequest,
    GetStoragesRequest,
    LoadCDROMRequest,
    ModifyIPAddressRequest,
    ModifyServerRequest,
    ModifyStorageRequest,
    RestartServerRequest,
    StartServerRequest,
    StopServerRequest,
)
from upcloud_client.request.base import compact


class TestServerRequests:
    """Test /server request construction."""

    def test_create_server_body(self):
        request = CreateServerRequest(
            zone="fi-hel1",
            title="Integration test server #1",
            hostname="debian.example.com",
            password_delivery="none",
            core_number=1,
            memory_amount=1024,
            storage_devices=[
                CreateServerStorageDevice(
                    action="clone",
                    storage="01000000-0000-4000-8000-000030060200",
                    title="disk1",
                    size=30,
                    tier="maxiops",
                )
            ],
            ip_addresses=[
                CreateServerIPAddress(access="private", family="IPv4"),
                CreateServerIPAddress(access="public", family="IPv6"),
            ],
            labels=[Label(key="env", value="test")],
            metadata=True,
        )

        body = request.to_body()

        assert request.request_url() == "/server"
        server = body["server"]
        assert server["core_number"] == "1"
        assert server["memory_amount"] == "1024"
        assert server["metadata"] == "yes"
        assert server["storage_devices"] == {
            "storage_device": [
                {
                    "action": "clone",
                    "size": 30,
                    "storage": "01000000-0000-4000-8000-000030060200",
                    "tier": "maxiops",
                    "title": "disk1",
                }
            ]
        }
        assert server["ip_addresses"]["ip_address"][1] == {"access": "public", "family": "IPv6"}
        assert server["labels"] == {"label": [{"key": "env", "value": "test"}]}
        assert "plan" not in server
        assert "avoid_host" not in server

    def test_create_server_login_user(self):
        request = CreateServerRequest(
            zone="fi-hel1", title="t", hostname="h", plan="1xCPU-1GB", login_user="deploy"
        )

        server = request.to_body()["server"]

        assert server["login_user"] == {"username": "deploy"}
        assert server["plan"] == "1xCPU-1GB"
        assert "storage_devices" not in server

    def test_modify_server_sends_only_set_fields(self):
        request = ModifyServerRequest(uuid="u-1", title="renamed", remote_access_enabled=False)

        assert request.request_url() == "/server/u-1"
        assert request.to_body() == {
            "server": {"remote_access_enabled": "no", "title": "renamed"}
        }

    def test_start_server_without_body(self):
        request = StartServerRequest(uuid="u-1", timeout=300)

        assert request.request_url() == "/server/u-1/start"
        assert request.to_body() is None

    def test_start_server_avoid_host(self):
        assert StartServerRequest(uuid="u-1", avoid_host=12).to_body() == {
            "server": {"avoid_host": 12}
        }

    def test_stop_server_body(self):
        request = StopServerRequest(uuid="u-1", stop_type="hard", timeout=60)

        assert request.request_url() == "/server/u-1/stop"
        assert request.to_body() == {"stop_server": {"stop_type": "hard", "timeout": "60"}}

    def test_restart_server_body(self):
        request = RestartServerRequest(
            uuid="u-1", stop_type="soft", timeout=30, timeout_action="destroy"
        )

        assert request.request_url() == "/server/u-1/restart"
        assert request.to_body() == {
            "restart_server": {"stop_type": "soft", "timeout": "30", "timeout_action": "destroy"}
        }

    def test_missing_uuid_rejected(self):
        with pytest.raises(InvalidRequestError):
            GetServerDetailsRequest(uuid="").request_url()


class TestStorageRequests:
    """Test /storage request construction."""

    @pytest.mark.parametrize(
        "request_, url",
        [
            (GetStoragesRequest(), "/storage"),
            (GetStoragesRequest(access="private"), "/storage/private"),
            (GetStoragesRequest(type="template"), "/storage/template"),
            (GetStoragesRequest(favorite=True), "/storage/favorite"),
        ],
    )
    def test_storage_list_filters(self, request_, url):
        assert request_.request_url() == url

    def test_multiple_filters_rejected(self):
        with pytest.raises(InvalidRequestError):
            GetStoragesRequest(access="public", type="disk").request_url()

    def test_create_storage_body(self):
        request = CreateStorageRequest(
            zone="fi-hel1",
            size=50,
            title="Test storage",
            tier="maxiops",
            backup_rule=BackupRule(interval="daily", time="0430", retention=30),
        )

        assert request.to_body() == {
            "storage": {
                "backup_rule": {"interval": "daily", "retention": "30", "time": "0430"},
                "size": "50",
                "tier": "maxiops",
                "title": "Test storage",
                "zone": "fi-hel1",
            }
        }

    def test_modify_storage_body(self):
        request = ModifyStorageRequest(uuid="s-1", title="New fancy title")

        assert request.request_url() == "/storage/s-1"
        assert request.to_body() == {"storage": {"title": "New fancy title"}}

    def test_attach_and_detach(self):
        attach = AttachStorageRequest(
            server_uuid="u-1", type="disk", address="scsi:0", storage_uuid="s-1"
        )
        detach = DetachStorageRequest(server_uuid="u-1", address="scsi:0")

        assert attach.request_url() == "/server/u-1/storage/attach"
        assert attach.to_body() == {
            "storage_device": {"address": "scsi:0", "storage": "s-1", "type": "disk"}
        }
        assert detach.request_url() == "/server/u-1/storage/detach"
        assert detach.to_body() == {"storage_device": {"address": "scsi:0"}}

    def test_clone_storage_body(self):
        request = CloneStorageRequest(uuid="s-1", zone="fi-hel1", title="Cloned storage")

        assert request.request_url() == "/storage/s-1/clone"
        assert request.to_body() == {"storage": {"title": "Cloned storage", "zone": "fi-hel1"}}

    def test_load_cdrom_requires_storage(self):
        with pytest.raises(InvalidRequestError):
            LoadCDROMRequest(server_uuid="u-1", storage_uuid="").to_body()


class TestNetworkRequests:
    """Test IP address and firewall request construction."""

    def test_assign_ip_address(self):
        request = AssignIPAddressRequest(server_uuid="u-1", access="public", family="IPv4")

        assert request.request_url() == "/ip_address"
        assert request.to_body() == {
            "ip_address": {"access": "public", "family": "IPv4", "server": "u-1"}
        }

    def test_modify_ip_address(self):
        request = ModifyIPAddressRequest(address="0.0.0.0", ptr_record="such.pointer.example.com")

        assert request.request_url() == "/ip_address/0.0.0.0"
        assert request.to_body() == {"ip_address": {"ptr_record": "such.pointer.example.com"}}

    def test_create_firewall_rule_appends_without_position(self):
        rule = FirewallRule(
            direction="in",
            action="accept",
            family="IPv4",
            protocol="tcp",
            destination_port_start="22",
            destination_port_end="22",
            comment="ssh",
        )

        body = CreateFirewallRuleRequest(server_uuid="u-1", firewall_rule=rule).to_body()

        assert body == {
            "firewall_rule": {
                "action": "accept",
                "comment": "ssh",
                "destination_port_end": "22",
                "destination_port_start": "22",
                "direction": "in",
                "family": "IPv4",
                "protocol": "tcp",
            }
        }

    def test_create_firewall_rule_with_position(self):
        rule = FirewallRule(direction="out", action="drop", position=3)

        body = CreateFirewallRuleRequest(server_uuid="u-1", firewall_rule=rule).to_body()

        assert body["firewall_rule"]["position"] == "3"

    def test_firewall_rule_paths(self):
        assert (
            GetFirewallRuleDetailsRequest(server_uuid="u-1", position=2).request_url()
            == "/server/u-1/firewall_rule/2"
        )
        assert (
            DeleteFirewallRuleRequest(server_uuid="u-1", position=1).request_url()
            == "/server/u-1/firewall_rule/1"
        )

    def test_position_zero_rejected(self):
        with pytest.raises(InvalidRequestError):
            DeleteFirewallRuleRequest(server_uuid="u-1", position=0).request_url()


def test_compact_drops_unset_values():
    assert compact({"a": None, "b": "", "c": [], "d": {}, "e": 0, "f": "x"}) == {"e": 0, "f": "x"}
