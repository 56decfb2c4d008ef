"""Configuration and client tests."""

import json

import httpx

from roadgateway_admin.client.client import Client
from roadgateway_admin.utils.config import ClientConfig, load_config


class TestClientConfig:
    """Test configuration loading."""

    def test_defaults(self):
        """Test default values."""
        config = ClientConfig()
        assert config.base_url == "http://localhost:8001/"
        assert config.verify_ssl is True
        assert config.headers == {}

    def test_from_dict_ignores_unknown(self):
        """Test unknown keys are dropped."""
        config = ClientConfig.from_dict({"base_url": "http://gw:8001/", "retries": 3})
        assert config.base_url == "http://gw:8001/"

    def test_from_env(self, monkeypatch):
        """Test environment variables are converted by type."""
        monkeypatch.setenv("TEST_ADMIN_BASE_URL", "http://gw:8001/")
        monkeypatch.setenv("TEST_ADMIN_VERIFY_SSL", "false")
        monkeypatch.setenv("TEST_ADMIN_READ_TIMEOUT", "2.5")

        config = ClientConfig.from_env("TEST_ADMIN_")
        assert config.base_url == "http://gw:8001/"
        assert config.verify_ssl is False
        assert config.read_timeout == 2.5

    def test_from_env_headers_and_invalid(self, monkeypatch):
        """Test JSON headers are parsed and bad numbers are skipped."""
        monkeypatch.setenv("TEST_ADMIN_HEADERS", '{"Admin-Token": "t"}')
        monkeypatch.setenv("TEST_ADMIN_CONNECT_TIMEOUT", "soon")

        config = ClientConfig.from_env("TEST_ADMIN_")
        assert config.headers == {"Admin-Token": "t"}
        assert config.connect_timeout == 10.0

    def test_from_env_headers_not_object(self, monkeypatch):
        """Test a JSON value other than an object is skipped for headers."""
        monkeypatch.setenv("TEST_ADMIN_HEADERS", '["x"]')

        config = ClientConfig.from_env("TEST_ADMIN_")
        assert config.headers == {}

    def test_merge(self):
        """Test merged values take precedence."""
        config = ClientConfig().merge({"read_timeout": 5.0})
        assert config.read_timeout == 5.0
        assert config.connect_timeout == 10.0

    def test_load_yaml_with_env_override(self, tmp_path, monkeypatch):
        """Test environment variables override the file."""
        path = tmp_path / "admin.yaml"
        path.write_text("base_url: http://gw:8001/\nread_timeout: 5\nlog_bodies: true\n")
        monkeypatch.setenv("TEST_ADMIN_READ_TIMEOUT", "7")

        config = load_config(str(path), env_prefix="TEST_ADMIN_")
        assert config.base_url == "http://gw:8001/"
        assert config.read_timeout == 7
        assert config.log_bodies is True

    def test_load_json(self, tmp_path):
        """Test loading a JSON file."""
        path = tmp_path / "admin.json"
        path.write_text(json.dumps({"user_agent": "ops-tool/1.0"}))

        config = load_config(str(path), env_prefix="TEST_ADMIN_")
        assert config.user_agent == "ops-tool/1.0"

    def test_missing_file(self, tmp_path):
        """Test a missing file falls back to defaults."""
        config = load_config(str(tmp_path / "missing.yaml"), env_prefix="TEST_ADMIN_")
        assert config == ClientConfig()


class TestClient:
    """Test client construction."""

    def test_services_share_transport(self, client):
        """Test all services use the client's transport."""
        assert client.apis._transport is client.transport
        assert client.cluster._transport is client.transport
        assert str(client.base_url) == "http://admin.test:8001/"

    def test_base_url_overrides_config(self):
        """Test an explicit base URL wins over the config."""
        config = ClientConfig(base_url="http://gw:8001/", user_agent="ops-tool/1.0")
        with Client("http://other:8001", config=config) as client:
            assert str(client.base_url) == "http://other:8001/"
            assert client.config.user_agent == "ops-tool/1.0"

    def test_from_config(self, tmp_path):
        """Test building a client from a config file."""
        path = tmp_path / "admin.yaml"
        path.write_text("base_url: http://gw:8001/admin\n")

        with Client.from_config(str(path), env_prefix="TEST_ADMIN_") as client:
            assert str(client.base_url) == "http://gw:8001/admin/"

    def test_raw_request(self, client, stub):
        """Test requests can be built and sent directly."""
        stub.add("GET", "plugins/schema/jwt", 200, {"fields": {}})
        request = client.new_request("GET", "plugins/schema/jwt")
        result = client.do(request)

        assert result.body == {"fields": {}}
        assert isinstance(stub.last, httpx.Request)
