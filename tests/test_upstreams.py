"""Upstreams and targets resource tests."""

import pytest

from roadgateway_admin.client.transport import NotFoundError
from roadgateway_admin.resources.targets import Target, TargetsGetAllOptions
from roadgateway_admin.resources.upstreams import Upstream, UpstreamsGetAllOptions


class TestUpstreamsService:
    """Test /upstreams operations."""

    def test_post(self, client, stub):
        """Test creating an upstream."""
        stub.add("POST", "upstreams", 201, {"id": "u1", "name": "service.v1"})
        client.upstreams.post(Upstream(name="service.v1", slots=10))

        assert stub.last_json() == {"name": "service.v1", "slots": 10}

    def test_get(self, client, stub):
        """Test fetching an upstream with its order list."""
        stub.add("GET", "upstreams/service.v1", 200, {
            "id": "u1",
            "name": "service.v1",
            "slots": 3,
            "orderlist": [2, 1, 3],
        })
        upstream = client.upstreams.get("service.v1")

        assert upstream.slots == 3
        assert upstream.orderlist == [2, 1, 3]

    def test_patch_prefers_name(self, client, stub):
        """Test patch addresses the upstream by name, then id."""
        stub.add("PATCH", "upstreams/service.v1", 200, {})
        stub.add("PATCH", "upstreams/u1", 200, {})

        client.upstreams.patch(Upstream(name="service.v1", id="u1", slots=20))
        assert stub.last.url.path == "/upstreams/service.v1"

        client.upstreams.patch(Upstream(id="u1", slots=20))
        assert stub.last.url.path == "/upstreams/u1"
        assert stub.last_json() == {"name": "", "id": "u1", "slots": 20}

        with pytest.raises(ValueError):
            client.upstreams.patch(Upstream(slots=20))

    def test_delete(self, client, stub):
        """Test deleting an upstream."""
        stub.add("DELETE", "upstreams/service.v1", 204)
        assert client.upstreams.delete("service.v1").status_code == 204

    def test_get_all(self, client, stub):
        """Test listing upstreams."""
        stub.add("GET", "upstreams", 200, {
            "total": 1,
            "data": [{"id": "u1", "name": "service.v1"}],
        })
        page = client.upstreams.get_all(UpstreamsGetAllOptions(name="service.v1"))

        assert page.data[0].id == "u1"
        assert stub.last.url.params["name"] == "service.v1"


class TestTargetsService:
    """Test /upstreams/{upstream}/targets operations."""

    def test_post(self, client, stub):
        """Test adding a target."""
        stub.add("POST", "upstreams/service.v1/targets", 201, {"id": "t1"})
        client.targets.post("service.v1", Target(target="10.0.0.1:80", weight=100))

        assert stub.last_json() == {"target": "10.0.0.1:80", "weight": 100}

    def test_get_all(self, client, stub):
        """Test listing targets including history."""
        stub.add("GET", "upstreams/service.v1/targets", 200, {
            "total": 2,
            "data": [
                {"id": "t2", "target": "10.0.0.1:80", "weight": 0},
                {"id": "t1", "target": "10.0.0.1:80", "weight": 100},
            ],
        })
        page = client.targets.get_all("service.v1", TargetsGetAllOptions(size=5))

        assert page.total == 2
        assert [t.weight for t in page.data] == [0, 100]

    def test_get_all_active(self, client, stub):
        """Test listing active targets."""
        stub.add("GET", "upstreams/service.v1/targets/active", 200, {
            "total": 1,
            "data": [{"id": "t1", "target": "10.0.0.1:80", "weight": 100}],
        })
        page = client.targets.get_all_active("service.v1")

        assert page.total == 1
        assert page.data[0].target == "10.0.0.1:80"

    def test_get_all_active_empty_object(self, client, stub):
        """Test an empty result reported as an object decodes to no targets."""
        stub.add("GET", "upstreams/service.v1/targets/active", 200, {
            "total": 0,
            "data": {},
        })
        page = client.targets.get_all_active("service.v1")

        assert page.total == 0
        assert page.data == []

    def test_delete_dot_key(self, client, stub):
        """Test a dot target cannot address the upstream itself."""
        with pytest.raises(ValueError):
            client.targets.delete("service.v1", "..")
        assert stub.requests == []

    def test_delete(self, client, stub):
        """Test deleting a target by host:port."""
        stub.add("DELETE", "upstreams/service.v1/targets/10.0.0.1:80", 204)
        assert client.targets.delete("service.v1", "10.0.0.1:80").status_code == 204

    def test_unknown_upstream(self, client):
        """Test targets of a missing upstream raise NotFoundError."""
        with pytest.raises(NotFoundError):
            client.targets.get_all("missing")
