"""
Configuration helpers for the Blockfrost client.

This module centralizes base URL selection, project id loading and default
timeouts. No secrets are stored in the repository; the project id is read from
the environment or a local TOML key file.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from blockfrost_http.errors import ConfigError, ConfigParseError, FileReadError

MAINNET_URL = "https://cardano-mainnet.blockfrost.io/api/v0"
PREPROD_URL = "https://cardano-preprod.blockfrost.io/api/v0/"
PREVIEW_URL = "https://cardano-preview.blockfrost.io/api/v0/"

# Default connection settings
DEFAULT_BASE_URL = os.getenv("BLOCKFROST_BASE_URL", MAINNET_URL)


def _load_timeout() -> float:
    raw_timeout = os.getenv("BLOCKFROST_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return 10.0
    return 10.0


DEFAULT_TIMEOUT = _load_timeout()

# Project id handling
PROJECT_ID_FIELD = "project_id"
PROJECT_ID_ENV_VAR = "BLOCKFROST_PROJECT_ID"
KEY_FILE_ENV_VAR = "BLOCKFROST_KEY_FILE"
DEFAULT_KEY_FILE = "blockfrost.toml"

LOG_LEVEL = os.getenv("BLOCKFROST_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("BLOCKFROST_LOG_FORMAT", "plain")  # json or plain


def load_key_from_file(key_path: str | os.PathLike[str]) -> str:
    """
    Read the ``project_id`` entry from a TOML key file.

    Raises:
        FileReadError: the file could not be read.
        ConfigParseError: the file is not valid TOML.
        ConfigError: ``project_id`` is absent or not a string.
    """
    path = Path(key_path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FileReadError(f"Error while reading file {str(path)!r}: {exc}") from exc
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigParseError(f"Error while parsing TOML in {str(path)!r}: {exc}") from exc
    project_id = data.get(PROJECT_ID_FIELD)
    if not isinstance(project_id, str):
        raise ConfigError(PROJECT_ID_FIELD)
    return project_id


def load_api_key() -> Optional[str]:
    """
    Load the Blockfrost project id from environment or a local key file.

    Returns:
        The project id if available, otherwise None. A key file that exists but
        cannot be loaded raises the matching ``BlockfrostError``.
    """
    env_key = os.getenv(PROJECT_ID_ENV_VAR)
    if env_key:
        return env_key.strip()

    key_path = os.getenv(KEY_FILE_ENV_VAR, DEFAULT_KEY_FILE)
    if key_path and Path(key_path).is_file():
        return load_key_from_file(key_path)

    return None


@dataclass(slots=True)
class BlockfrostConfig:
    """Runtime configuration for Blockfrost access."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    api_key: Optional[str] = field(default=None, repr=False)
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT

    @classmethod
    def from_env(cls) -> "BlockfrostConfig":
        """Build a config with the project id resolved from env or key file."""
        return cls(
            base_url=os.getenv("BLOCKFROST_BASE_URL", MAINNET_URL),
            timeout=_load_timeout(),
            api_key=load_api_key(),
            log_level=os.getenv("BLOCKFROST_LOG_LEVEL", "INFO"),
            log_format=os.getenv("BLOCKFROST_LOG_FORMAT", "plain"),
        )


default_config = BlockfrostConfig()
