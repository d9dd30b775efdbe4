"""UI components for the host menu."""

from sshlist.cli.ui.base import MenuUI
from sshlist.cli.ui.menu import RichTerminalMenu
from sshlist.cli.ui.palettes import apply_palette, get_palette, palette_names
from sshlist.cli.ui.panels import clear_screen, console, show_cursor
from sshlist.cli.ui.whiptail import WhiptailMenu

__all__ = [
    "MenuUI",
    "RichTerminalMenu",
    "WhiptailMenu",
    "apply_palette",
    "get_palette",
    "palette_names",
    "clear_screen",
    "console",
    "show_cursor",
]
