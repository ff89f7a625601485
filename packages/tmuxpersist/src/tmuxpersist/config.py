"""Configuration management for tmux-persist.

Reads the [default] table from tmux-persist.toml.
"""

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

from .errors import ConfigError

CONFIG_NAME = "tmux-persist.toml"
USER_CONFIG = Path("~/.config/tmux-persist/config.toml")


@dataclass(frozen=True)
class PersistConfig:
    """Settings for a capture run.

    Attributes:
        output_dir: Directory restore scripts are written to.
        extension: File extension of restore scripts, without the dot.
        shell: Interpreter named in the shebang line.
        timeout: Seconds to wait for each tmux/ps call.
        tmux: Name or path of the tmux executable.
    """

    output_dir: str = "~/.tmux/persist"
    extension: str = "sh"
    shell: str = "/usr/bin/env bash"
    timeout: float = 5.0
    tmux: str = "tmux"

    @property
    def output_path(self) -> Path:
        """Output directory with ~ expanded."""
        return Path(self.output_dir).expanduser()

    @property
    def restore_glob(self) -> str:
        """Glob matching generated restore scripts."""
        return f"*-restore.{self.extension}"

    def script_path(self, session: str) -> Path:
        """Destination of the restore script for a session."""
        # tmux allows slashes in session names
        filename = session.replace("/", "_")
        return self.output_path / f"{filename}-restore.{self.extension}"

    @classmethod
    def from_dict(cls, data: dict) -> "PersistConfig":
        """Build from a [default] table, ignoring unknown keys.

        Raises:
            ConfigError: If a known key has the wrong type.
        """
        known = {f.name: f for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key not in known:
                continue
            if key == "timeout":
                if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                    raise ConfigError(f"timeout must be a positive number, got {value!r}")
                value = float(value)
            elif not isinstance(value, str) or not value:
                raise ConfigError(f"{key} must be a non-empty string, got {value!r}")
            values[key] = value

        if "extension" in values:
            values["extension"] = values["extension"].lstrip(".")
        return cls(**values)


def _find_config_file() -> Optional[Path]:
    """Find tmux-persist.toml in current or parent directories, then the user config."""
    current = Path.cwd()

    for parent in [current] + list(current.parents):
        config_file = parent / CONFIG_NAME
        if config_file.exists():
            return config_file

    user_config = USER_CONFIG.expanduser()
    if user_config.exists():
        return user_config

    return None


def _load_config(path: Optional[Path] = None) -> dict:
    """Load raw configuration from file."""
    if path is None:
        path = _find_config_file()

    if path is None or not path.exists():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e


def load_config(path: Optional[Path] = None) -> PersistConfig:
    """Load configuration, falling back to defaults.

    Args:
        path: Explicit config file. Discovered when None.

    Raises:
        ConfigError: If the file is unreadable or has invalid values.
    """
    data = _load_config(path)
    section = data.get("default", {})
    if not isinstance(section, dict):
        raise ConfigError("[default] must be a table")
    return PersistConfig.from_dict(section)
