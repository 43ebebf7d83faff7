"""Tests for client configuration."""

import dataclasses

import pytest

from saidp_client import ClientConfig, ClientSettings, ConfigError

from .conftest import APP_ID, APP_KEY, HOST, REALM


class TestClientConfig:
    """Tests for ClientConfig."""

    def test_defaults(self, config):
        """Port defaults to 443 with https and certificate checks on."""
        assert config.port == 443
        assert config.ssl is True
        assert config.bypass_cert_validation is False

    @pytest.mark.parametrize("port", [0, None])
    def test_zero_port_means_443(self, port):
        """An unset port falls back to 443."""
        config = ClientConfig(app_id=APP_ID, app_key=APP_KEY, host=HOST, realm=REALM, port=port)
        assert config.port == 443

    def test_custom_port(self):
        config = ClientConfig(app_id=APP_ID, app_key=APP_KEY, host=HOST, realm=REALM, port=8443)
        assert config.port == 8443

    @pytest.mark.parametrize("missing", ["app_id", "app_key", "host", "realm"])
    def test_required_fields(self, missing):
        """Construction fails when a required field is empty."""
        values = {"app_id": APP_ID, "app_key": APP_KEY, "host": HOST, "realm": REALM}
        values[missing] = ""

        with pytest.raises(ConfigError, match=missing):
            ClientConfig(**values)

    @pytest.mark.parametrize("key", ["xyz", "abc", "00 11"])
    def test_app_key_must_be_hex(self, key):
        """The key is hex-decoded, so it must be valid hex."""
        with pytest.raises(ConfigError, match="hex"):
            ClientConfig(app_id=APP_ID, app_key=key, host=HOST, realm=REALM)

    def test_key_bytes(self, config):
        assert config.key_bytes == bytes.fromhex(APP_KEY)

    def test_base_url(self):
        """Scheme follows the ssl flag."""
        secure = ClientConfig(app_id=APP_ID, app_key=APP_KEY, host=HOST, realm=REALM)
        plain = ClientConfig(
            app_id=APP_ID, app_key=APP_KEY, host=HOST, realm=REALM, port=80, ssl=False
        )
        assert secure.base_url == "https://idp.example.com:443/secureauth1"
        assert plain.base_url == "http://idp.example.com:80/secureauth1"

    def test_immutable(self, config):
        """The configuration is read-only after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.host = "other.example.com"

    def test_repr_hides_key(self, config):
        """The application key never appears in repr."""
        assert APP_KEY not in repr(config)
        assert APP_ID in repr(config)


class TestClientSettings:
    """Tests for environment-based settings."""

    def test_from_environment(self, monkeypatch):
        """SAIDP_* variables populate the settings."""
        monkeypatch.setenv("SAIDP_APP_ID", APP_ID)
        monkeypatch.setenv("SAIDP_APP_KEY", APP_KEY)
        monkeypatch.setenv("SAIDP_HOST", HOST)
        monkeypatch.setenv("SAIDP_REALM", REALM)
        monkeypatch.setenv("SAIDP_PORT", "0")
        monkeypatch.setenv("SAIDP_BYPASS_CERT_VALIDATION", "true")

        config = ClientSettings(_env_file=None).to_config()

        assert config.app_id == APP_ID
        assert config.port == 443
        assert config.bypass_cert_validation is True

    def test_missing_values(self, monkeypatch):
        """Settings without credentials do not produce a config."""
        for name in ("APP_ID", "APP_KEY", "HOST", "REALM"):
            monkeypatch.delenv(f"SAIDP_{name}", raising=False)

        with pytest.raises(ConfigError):
            ClientSettings(_env_file=None).to_config()
