"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional

from sshlist.utils.exceptions import ConfigurationError

UI_BACKENDS = ("terminal", "whiptail")


def get_sshlist_dir() -> Path:
    """Get the sshlist data directory (XDG-compliant)."""
    if env_dir := os.environ.get("SSHLIST_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "sshlist"


def default_ssh_config() -> Path:
    """Get the per-user OpenSSH client config path."""
    return Path.home() / ".ssh" / "config"


class Config:
    """Application configuration."""

    # Keys read from config.json
    KEYS = (
        "ssh_config",
        "connect_program",
        "palette",
        "ui",
        "pause_seconds",
        "debug",
    )

    def __init__(self, sshlist_dir: Optional[Path] = None):
        """Load config from directory."""
        self.sshlist_dir = sshlist_dir or get_sshlist_dir()
        self._config_file = self.sshlist_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        # Set defaults
        self.ssh_config = str(default_ssh_config())
        self.connect_program = "ssh"
        self.palette = "main"
        self.ui = "terminal"
        # Pause after a session ends, avoids flicker on redraw
        self.pause_seconds = 0.5
        self.debug = False
        self._defaults = {key: getattr(self, key) for key in self.KEYS}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
            except (ValueError, OSError):
                data = {}
            # Anything but a JSON object is treated as corrupt
            if not isinstance(data, dict):
                data = {}
            for key in self.KEYS:
                if key in data:
                    setattr(self, key, data[key])

        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply shell SSHLIST_* vars on top of file values."""
        prefix = "SSHLIST_"

        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue
            attr_name = key[len(prefix) :].lower()
            if attr_name not in self.KEYS:
                continue
            # Convert value based on the default's type
            current = self._defaults[attr_name]
            if isinstance(current, bool):
                setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
            elif isinstance(current, (int, float)):
                try:
                    setattr(self, attr_name, type(current)(value))
                except ValueError:
                    pass
            else:
                setattr(self, attr_name, value)

    def validate(self):
        """Raise ConfigurationError if settings cannot be used."""
        for key in ("ssh_config", "connect_program", "palette", "ui"):
            value = getattr(self, key)
            if not isinstance(value, str):
                raise ConfigurationError(f"{key} must be a string, got {value!r}")
        if self.ui not in UI_BACKENDS:
            raise ConfigurationError(
                f"Unknown ui backend '{self.ui}' (expected one of: "
                f"{', '.join(UI_BACKENDS)})"
            )
        pause = self.pause_seconds
        if isinstance(pause, bool) or not isinstance(pause, (int, float)):
            raise ConfigurationError(f"pause_seconds must be a number, got {pause!r}")
        if pause < 0:
            raise ConfigurationError("pause_seconds must not be negative")
        if not self.connect_program:
            raise ConfigurationError("connect_program must not be empty")

    @property
    def ssh_config_path(self) -> Path:
        """SSH client config file, with ~ expanded."""
        return Path(self.ssh_config).expanduser()

    @property
    def debug_log(self) -> Path:
        """Path to debug log file."""
        return self.sshlist_dir / "debug.log"
