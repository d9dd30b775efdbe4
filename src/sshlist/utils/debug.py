"""Debug logging utility."""

import sys
from datetime import datetime
from typing import Optional

from sshlist.utils.config import Config, get_sshlist_dir

_config: Optional[Config] = None


def configure(config: Optional[Config]) -> None:
    """Log according to ``config`` (the one the CLI resolved).

    Passing None drops it, so the next message loads from SSHLIST_DIR.
    """
    global _config
    _config = config


def _get_config() -> Config:
    """Get the configured instance, loading one on first use."""
    global _config
    if _config is None:
        _config = Config(get_sshlist_dir())
    return _config


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        log_path = _get_config().debug_log
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "a") as f:
            f.write(line + "\n")
    except OSError:
        pass


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'parse', 'menu', 'connect'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[sshlist:{category}] {timestamp} {message}"
    if extras:
        line += f" | {extras}"

    # Log to file (always) and stderr
    _log_to_file(line)
    print(line, file=sys.stderr)


def debug_parse(message: str, **kwargs):
    """Log parse-related debug message."""
    debug("parse", message, **kwargs)


def debug_menu(message: str, **kwargs):
    """Log menu-related debug message."""
    debug("menu", message, **kwargs)


def debug_connect(message: str, **kwargs):
    """Log connect-related debug message."""
    debug("connect", message, **kwargs)
