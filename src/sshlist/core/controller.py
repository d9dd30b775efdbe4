"""Read-select-dispatch loop driving the host menu."""

import subprocess
import time
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional

from sshlist.core.menu import (
    Connect,
    MenuEntry,
    Quit,
    build_menu,
    menu_options,
    resolve_selection,
)
from sshlist.core.parser import parse_hosts
from sshlist.utils.debug import debug_connect, debug_menu

if TYPE_CHECKING:
    from sshlist.cli.ui.base import MenuUI
    from sshlist.utils.config import Config

BACKTITLE = "SSH List"

MENU_TITLE = "SSH List Menu"
MENU_PROMPT = "Select an SSH host to connect to:"

QUIT_TITLE = "Quit"
QUIT_MESSAGE = "Thank you for using SSH List. Goodbye!"

CANCELLED_TITLE = "Cancelled"
CANCELLED_MESSAGE = "No valid option chosen or operation cancelled."

CONNECT_FAILED_TITLE = "Connection failed"

EXIT_OK = 0


class MenuController:
    """Show the host menu until the user picks Quit.

    The menu is rebuilt from a fresh parse of the SSH config on every
    pass, so edits made during a session show up on the next redraw.
    """

    def __init__(
        self,
        ui: "MenuUI",
        ssh_config: Path,
        connect_program: str = "ssh",
        pause_seconds: float = 0.5,
        runner: Optional[Callable[[list[str]], int]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.ui = ui
        self.ssh_config = ssh_config
        self.connect_program = connect_program
        self.pause_seconds = pause_seconds
        self.runner = runner or _run_foreground
        self.sleep = sleep

    @classmethod
    def from_config(cls, config: "Config", ui: "MenuUI") -> "MenuController":
        return cls(
            ui,
            config.ssh_config_path,
            connect_program=config.connect_program,
            pause_seconds=float(config.pause_seconds),
        )

    def build(self) -> tuple[MenuEntry, ...]:
        """Parse the SSH config and build a fresh menu."""
        hosts = parse_hosts(self.ssh_config)
        menu = build_menu(hosts, self.connect_program)
        debug_menu("built menu", entries=len(menu))
        return menu

    def select(self, menu: tuple[MenuEntry, ...]) -> Optional[MenuEntry]:
        """Block on the menu renderer and resolve the answer."""
        raw = self.ui.select(MENU_TITLE, MENU_PROMPT, menu_options(menu))
        entry = resolve_selection(menu, raw)
        debug_menu("selection", raw=repr(raw), resolved=entry is not None)
        return entry

    def connect(self, action: Connect) -> None:
        """Run the connect program in the foreground, then pause."""
        debug_connect("starting", argv=action.argv)
        try:
            returncode = self.runner(action.argv)
        except OSError as e:
            debug_connect("failed to start", program=action.program, error=e)
            self.ui.message(
                CONNECT_FAILED_TITLE,
                f"Could not run '{action.program}': {e.strerror or e}",
            )
            return
        debug_connect("finished", host=action.host, returncode=returncode)
        self.sleep(self.pause_seconds)

    def run(self) -> int:
        """Loop until Quit is chosen.

        Returns:
            Process exit status (always EXIT_OK)
        """
        while True:
            menu = self.build()
            entry = self.select(menu)

            if entry is None:
                self.ui.message(CANCELLED_TITLE, CANCELLED_MESSAGE)
                continue

            if isinstance(entry.action, Quit):
                self.ui.message(QUIT_TITLE, QUIT_MESSAGE, 10, 60)
                return EXIT_OK

            self.connect(entry.action)


def _run_foreground(argv: list[str]) -> int:
    """Run argv attached to the current terminal, return its exit status."""
    return subprocess.run(argv).returncode
