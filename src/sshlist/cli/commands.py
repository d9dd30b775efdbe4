"""CLI command handlers."""

from rich.table import Table

from sshlist.cli.helpers import make_menu_ui
from sshlist.cli.ui.palettes import (
    ALIASES,
    DEFAULT_PALETTE,
    apply_palette,
    palette_names,
)
from sshlist.cli.ui.panels import console, show_cursor
from sshlist.core.controller import MenuController
from sshlist.core.menu import HostEntry, build_menu
from sshlist.core.parser import parse_hosts
from sshlist.utils.config import Config
from sshlist.utils.exceptions import SshListError

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def cmd_menu(config: Config) -> int:
    """Run the interactive host menu until Quit."""
    try:
        config.validate()
        palette = apply_palette(config.palette)
        ui = make_menu_ui(config, palette)
        return MenuController.from_config(config, ui).run()
    except SshListError as e:
        console.print(f"[red]Error:[/red] {e}")
        return EXIT_ERROR
    except KeyboardInterrupt:
        show_cursor()
        console.print()
        return EXIT_INTERRUPTED


def cmd_hosts(config: Config) -> int:
    """Print the menu that would be shown, without prompting."""
    try:
        config.validate()
    except SshListError as e:
        console.print(f"[red]Error:[/red] {e}")
        return EXIT_ERROR

    hosts = parse_hosts(config.ssh_config_path)
    menu = build_menu(hosts, config.connect_program)

    if not hosts:
        console.print(f"[dim]No hosts found in {config.ssh_config_path}[/dim]")

    table = Table(title=f"Hosts in {config.ssh_config_path}", title_justify="left")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Entry")
    table.add_column("Command", style="dim")
    for entry in menu:
        command = " ".join(entry.action.argv) if isinstance(entry, HostEntry) else ""
        table.add_row(str(entry.index), entry.label, command)
    console.print(table)
    return EXIT_OK


def cmd_palettes() -> None:
    """List available colour palettes."""
    for name in palette_names():
        notes = []
        if name == DEFAULT_PALETTE:
            notes.append("default")
        if name in ALIASES:
            notes.append(f"alias of {ALIASES[name]}")
        suffix = f" [dim]({', '.join(notes)})[/dim]" if notes else ""
        console.print(f"{name}{suffix}")
