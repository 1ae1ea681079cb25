"""Settings module with unified configuration precedence: CLI > ENV > CONFIG FILE."""

from __future__ import annotations

import os
import tomllib
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .constants import MAINNET_ENDPOINTS, MAX_PAGE_LIMIT, TESTNET_ENDPOINTS

load_dotenv()

CONFIG_ENV_VAR = "DEFI_POSITIONS_CONFIG"
CONFIG_TABLE = "defi_positions"
SECRET_FIELDS = frozenset({"node_api_key"})


class Network(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"


class TomlConfigSource(PydanticBaseSettingsSource):
    """Lowest-precedence source reading a TOML config file.

    Without an explicit path, ``./defi-positions.toml`` and then
    ``~/.config/defi-positions/config.toml`` are tried.
    """

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None):
        super().__init__(settings_cls)
        self._path = path

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return None, "", False

    def _resolve_path(self) -> Path | None:
        if self._path:
            return self._path
        local_config = Path("defi-positions.toml")
        user_config = Path.home() / ".config" / "defi-positions" / "config.toml"
        if local_config.exists():
            return local_config
        if user_config.exists():
            return user_config
        return None

    def __call__(self) -> dict[str, Any]:
        path = self._resolve_path()
        if path is None or not path.exists():
            return {}

        with path.open("rb") as f:
            data = tomllib.load(f)  # supports top-level or [defi_positions]
        body = data.get(CONFIG_TABLE, data)
        if not isinstance(body, dict):
            return {}

        for key in SECRET_FIELDS:
            if key in body:
                raise ValueError(
                    f"Security violation: '{key}' found in TOML config file. "
                    f"Secrets must only be provided via environment variables or CLI flags."
                )
        return body


class ScannerSettings(BaseSettings):
    """Single source of truth for configuration. Values may come from:
    - CLI (init kwargs)
    - ENV / .env (prefixed with DEFI_POSITIONS_)
    - Config file (TOML), lowest precedence

    Do not read os.environ or files elsewhere in the codebase.
    """

    # --- network / endpoints ---
    network: Network = Network.MAINNET
    fullnode_url: str | None = None
    node_api_key: SecretStr | None = None

    # --- account ---
    account_address: str | None = None

    # --- HTTP ---
    request_timeout: float = Field(default=10.0, gt=0)
    max_retries: int = Field(default=5, ge=1)
    page_limit: int = Field(default=MAX_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT)

    # --- adapters ---
    include_generic_fallback: bool = False
    disabled_adapters: list[str] = Field(default_factory=list)

    # --- output ---
    output_format: OutputFormat = OutputFormat.TABLE

    # --- logging ---
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="DEFI_POSITIONS_",
        env_file=".env",
        extra="ignore",  # ignore unknown keys in env/config file
    )

    @field_validator("node_api_key", mode="before")
    @classmethod
    def wrap_secrets(cls, v: Any) -> SecretStr | None:
        """Wrap string secrets in SecretStr."""
        if v is None or isinstance(v, SecretStr):
            return v
        return SecretStr(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Custom config-file source with explicit precedence: CLI > ENV > FILE."""
        env_cfg = os.environ.get(CONFIG_ENV_VAR)
        cfg_path = Path(env_cfg) if env_cfg else None

        return (
            init_settings,  # CLI (highest)
            env_settings,  # ENV
            TomlConfigSource(settings_cls, cfg_path),  # CONFIG (lowest)
            file_secret_settings,  # optional secrets dir
        )

    def as_safe_dict(self) -> dict[str, Any]:
        """Return the config as a dict with secrets redacted."""
        data = self.model_dump(mode="json")
        if self.node_api_key:
            data["node_api_key"] = "***redacted***"
        return data

    @property
    def fullnode_url_resolved(self) -> str:
        """Configured fullnode URL, or the default endpoint of the network."""
        if self.fullnode_url:
            return self.fullnode_url.rstrip("/")
        endpoints = {
            Network.MAINNET: MAINNET_ENDPOINTS,
            Network.TESTNET: TESTNET_ENDPOINTS,
        }
        return endpoints[self.network]["fullnode"]

    @property
    def account_address_required(self) -> str:
        """Get account_address, raising ValueError if not set."""
        if self.account_address is None:
            raise ValueError("account_address must be configured")
        return self.account_address
