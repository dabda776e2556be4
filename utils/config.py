"""
Local configuration storage for the SpaceTraders client.

The config file is a single JSON object holding the agent's auth token.
Reads never fail: a missing or malformed file simply means there is no
config yet.
"""

import json
import logging
from dataclasses import dataclass, asdict
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / CONFIG_FILE_NAME

PathLike = Union[str, Path]


class ConfigErrorKind(Enum):
    """Kinds of config failures."""
    FILE_WRITE = "file_write"


class ConfigError(Exception):
    """Raised when the config file cannot be written."""

    def __init__(self, kind: ConfigErrorKind = ConfigErrorKind.FILE_WRITE):
        self.kind = kind
        super().__init__(f"Config error: {kind.value}")


@dataclass(frozen=True)
class ConfigData:
    """The shape of the data contained in the config file."""
    token: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ConfigData':
        token = data['token']
        if not isinstance(token, str):
            raise TypeError("token must be a string")
        return cls(token=token)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def read_config_file(config_file_path: PathLike) -> Optional[ConfigData]:
    """
    Read config data from the given file.

    Args:
        config_file_path: Path to the config file

    Returns:
        ConfigData, or None if the file is absent, unreadable or malformed
    """
    try:
        raw = Path(config_file_path).read_text(encoding="utf-8")
        return ConfigData.from_dict(json.loads(raw))
    except (OSError, ValueError, KeyError, TypeError) as e:
        logger.debug("No usable config at %s: %s", config_file_path, e)
        return None


def write_config_file(config_data: ConfigData, config_file_path: PathLike) -> None:
    """
    Write config data to the given file as pretty JSON, replacing any
    existing contents.

    Raises:
        ConfigError: If the file cannot be serialized or written
    """
    try:
        payload = json.dumps(config_data.to_dict(), indent=2, ensure_ascii=False)
        Path(config_file_path).write_text(payload, encoding="utf-8")
    except (OSError, TypeError, ValueError) as e:
        logger.error("Failed to write config file %s: %s", config_file_path, e)
        raise ConfigError(ConfigErrorKind.FILE_WRITE) from e
    logger.debug("Wrote config file %s", config_file_path)


def read_default_config() -> Optional[ConfigData]:
    """Read config data from the default config path."""
    return read_config_file(DEFAULT_CONFIG_PATH)


def write_default_config(config_data: ConfigData) -> None:
    """Write config data to the default config path."""
    write_config_file(config_data, DEFAULT_CONFIG_PATH)
