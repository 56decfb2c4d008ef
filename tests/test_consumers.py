"""Consumers resource tests."""

import pytest

from roadgateway_admin.plugins.configs import KeyAuthenticationConfig
from roadgateway_admin.resources.consumers import (
    ACLGroup,
    Consumer,
    ConsumersGetAllOptions,
)


class TestConsumersService:
    """Test /consumers operations."""

    def test_post_and_get(self, client, stub):
        """Test creating and fetching a consumer."""
        stub.add("POST", "consumers", 201, {"id": "c1", "username": "bob"})
        stub.add("GET", "consumers/bob", 200, {
            "id": "c1",
            "username": "bob",
            "custom_id": "ext-1",
        })

        client.consumers.post(Consumer(username="bob", custom_id="ext-1"))
        assert stub.last_json() == {"username": "bob", "custom_id": "ext-1"}

        consumer = client.consumers.get("bob")
        assert consumer.id == "c1"
        assert consumer.custom_id == "ext-1"

    def test_patch_prefers_id(self, client, stub):
        """Test patch addresses the consumer by id, then username."""
        stub.add("PATCH", "consumers/c1", 200, {"id": "c1"})
        stub.add("PATCH", "consumers/bob", 200, {"id": "c1"})

        client.consumers.patch(Consumer(id="c1", username="bob"))
        assert stub.last.url.path == "/consumers/c1"

        client.consumers.patch(Consumer(username="bob", custom_id="ext-2"))
        assert stub.last.url.path == "/consumers/bob"

        with pytest.raises(ValueError):
            client.consumers.patch(Consumer(custom_id="ext-2"))

    def test_delete(self, client, stub):
        """Test deleting a consumer."""
        stub.add("DELETE", "consumers/bob", 204)
        assert client.consumers.delete("bob").status_code == 204

    def test_get_all(self, client, stub):
        """Test listing consumers."""
        stub.add("GET", "consumers", 200, {
            "total": 2,
            "data": [{"username": "alice"}, {"username": "bob"}],
        })
        page = client.consumers.get_all(ConsumersGetAllOptions(username="bob"))

        assert [c.username for c in page.data] == ["alice", "bob"]
        assert stub.last.url.params["username"] == "bob"

    def test_configure_plugin(self, client, stub):
        """Test per-consumer plugin settings are posted."""
        stub.add("POST", "consumers/bob/key-auth", 201, {"key": "secret"})
        result = client.consumers.configure_plugin("bob", "key-auth", {"key": "secret"})

        assert result.body == {"key": "secret"}
        assert stub.last_json() == {"key": "secret"}

    def test_configure_plugin_with_config(self, client, stub):
        """Test a wire config is projected when posted."""
        stub.add("POST", "consumers/bob/key-auth", 201, {})
        client.consumers.configure_plugin(
            "bob", "key-auth", KeyAuthenticationConfig(key_names=["apikey"])
        )
        assert stub.last_json() == {"key_names": ["apikey"]}


class TestConsumerACLsService:
    """Test /consumers/{consumer}/acls operations."""

    def test_configure(self, client, stub):
        """Test adding a consumer to a group."""
        stub.add("POST", "consumers/bob/acls", 201, {
            "id": "g1",
            "group": "admins",
            "consumer_id": "c1",
        })
        result = client.consumer_acls.configure("bob", ACLGroup(group="admins"))

        assert result.status_code == 201
        assert stub.last_json() == {"group": "admins"}

    def test_get(self, client, stub):
        """Test listing a consumer's groups."""
        stub.add("GET", "consumers/bob/acls", 200, {
            "total": 1,
            "data": [{"id": "g1", "group": "admins", "consumer_id": "c1"}],
        })
        page = client.consumer_acls.get("bob")

        assert page.total == 1
        assert page.data[0].group == "admins"

    def test_delete(self, client, stub):
        """Test removing a consumer from a group."""
        stub.add("DELETE", "consumers/bob/acls/g1", 204)
        assert client.consumer_acls.delete("bob", "g1").status_code == 204
