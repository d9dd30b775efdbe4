"""Menu backend driving the newt ``whiptail`` dialog program."""

import shutil
import subprocess
from typing import Optional

from sshlist.utils.exceptions import MenuBackendError

WHIPTAIL = "whiptail"

# Menu geometry: height, width, visible list rows
MENU_HEIGHT = 18
MENU_WIDTH = 100
MENU_LIST_HEIGHT = 6


class WhiptailMenu:
    """whiptail-based menu and message boxes.

    Colours come from the NEWT_COLORS environment variable, see
    sshlist.cli.ui.palettes.apply_palette.
    """

    def __init__(self, backtitle: str = ""):
        if shutil.which(WHIPTAIL) is None:
            raise MenuBackendError(
                "whiptail not found in PATH (install the newt/whiptail package "
                "or use --ui terminal)",
                backend=WHIPTAIL,
            )
        self.backtitle = backtitle

    def _base_args(self, title: str) -> list[str]:
        return [WHIPTAIL, "--backtitle", self.backtitle, "--title", title]

    def menu_args(
        self,
        title: str,
        prompt: str,
        options: list[tuple[str, str]],
    ) -> list[str]:
        """Build the whiptail --menu command line."""
        args = self._base_args(title) + [
            "--nocancel",
            "--clear",
            "--menu",
            f"\n{prompt}\n\n",
            str(MENU_HEIGHT),
            str(MENU_WIDTH),
            str(MENU_LIST_HEIGHT),
        ]
        for tag, label in options:
            args += [tag, label]
        return args

    def select(
        self,
        title: str,
        prompt: str,
        options: list[tuple[str, str]],
    ) -> Optional[str]:
        """Show the menu, return the chosen tag or None on Esc."""
        # whiptail draws on stdout and reports the choice on stderr
        result = subprocess.run(
            self.menu_args(title, prompt, options),
            stderr=subprocess.PIPE,
            text=True,
        )
        if result.returncode != 0:
            return None
        return result.stderr.strip() or None

    def message(
        self,
        title: str,
        text: str,
        height: int = 10,
        width: int = 60,
    ) -> None:
        """Show a --msgbox and wait for OK."""
        subprocess.run(
            self._base_args(title) + ["--msgbox", text, str(height), str(width)]
        )
