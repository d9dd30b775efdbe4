"""Helper functions for CLI - config loading and backend selection."""

from pathlib import Path
from typing import Optional

from sshlist.cli.ui.base import MenuUI
from sshlist.cli.ui.palettes import Palette
from sshlist.core.controller import BACKTITLE
from sshlist.utils.config import Config, get_sshlist_dir
from sshlist.utils.debug import configure as configure_debug


def load_config(
    ssh_config: Optional[Path] = None,
    palette: Optional[str] = None,
    ui: Optional[str] = None,
) -> Config:
    """Load config, then apply command line overrides on top."""
    config = Config(get_sshlist_dir())
    if ssh_config is not None:
        config.ssh_config = str(ssh_config)
    if palette is not None:
        config.palette = palette
    if ui is not None:
        config.ui = ui
    configure_debug(config)
    return config


def make_menu_ui(config: Config, palette: Palette) -> MenuUI:
    """Create the menu backend named by config.ui."""
    if config.ui == "whiptail":
        from sshlist.cli.ui.whiptail import WhiptailMenu

        return WhiptailMenu(backtitle=BACKTITLE)

    from sshlist.cli.ui.menu import RichTerminalMenu

    return RichTerminalMenu(backtitle=BACKTITLE, palette=palette)
