"""
Client configuration.

``ClientConfig`` is the immutable connection descriptor passed to every
operation. ``ClientSettings`` loads the same values from the environment.
"""

import binascii
from dataclasses import dataclass, field
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError

DEFAULT_PORT = 443

_REQUIRED_FIELDS = ("app_id", "app_key", "host", "realm")


@dataclass(frozen=True)
class ClientConfig:
    """
    Connection details for a SecureAuth realm.

    Attributes:
        app_id: Application ID issued for the realm
        app_key: Hex-encoded application key (HMAC secret)
        host: DNS name of the SecureAuth server
        realm: Realm path segment, e.g. ``secureauth1``
        port: Server port; ``0`` or ``None`` means 443
        ssl: Use https when True
        bypass_cert_validation: Skip TLS certificate verification.
            Insecure, only for lab servers with self-signed certificates.
    """
    app_id: str
    app_key: str = field(repr=False)
    host: str
    realm: str
    port: int | None = DEFAULT_PORT
    ssl: bool = True
    bypass_cert_validation: bool = False

    def __post_init__(self) -> None:
        for name in _REQUIRED_FIELDS:
            if not getattr(self, name):
                raise ConfigError(f"{name} is required for creating a new client")
        try:
            binascii.unhexlify(self.app_key)
        except (binascii.Error, ValueError) as e:
            raise ConfigError("app_key must be a hex-encoded string") from e
        if not self.port:
            object.__setattr__(self, "port", DEFAULT_PORT)

    @property
    def key_bytes(self) -> bytes:
        """The decoded HMAC key."""
        return binascii.unhexlify(self.app_key)

    @property
    def scheme(self) -> str:
        return "https" if self.ssl else "http"

    @property
    def base_url(self) -> str:
        """``scheme://host:port/realm``; endpoints are appended verbatim."""
        return f"{self.scheme}://{self.host}:{self.port}/{self.realm}"


class ClientSettings(BaseSettings):
    """Client settings loaded from ``SAIDP_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SAIDP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_id: str = Field(
        default="",
        description="Application ID for the SecureAuth realm",
    )
    app_key: str = Field(
        default="",
        description="Hex-encoded application key",
    )
    host: str = Field(
        default="",
        description="SecureAuth server host name",
    )
    port: int = Field(
        default=DEFAULT_PORT,
        description="SecureAuth server port (0 means 443)",
    )
    realm: str = Field(
        default="",
        description="Realm path segment, e.g. secureauth1",
    )
    ssl: bool = Field(
        default=True,
        description="Connect over https",
    )
    bypass_cert_validation: bool = Field(
        default=False,
        description="Disable TLS certificate verification (not recommended)",
    )

    log_level: str = Field(
        default="INFO",
        description="Log level used by setup_logging",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON",
    )

    def to_config(self) -> ClientConfig:
        """Build a validated ``ClientConfig``; raises ``ConfigError``."""
        return ClientConfig(
            app_id=self.app_id,
            app_key=self.app_key,
            host=self.host,
            realm=self.realm,
            port=self.port,
            ssl=self.ssl,
            bypass_cert_validation=self.bypass_cert_validation,
        )


@lru_cache
def get_settings() -> ClientSettings:
    """Get cached client settings."""
    return ClientSettings()
