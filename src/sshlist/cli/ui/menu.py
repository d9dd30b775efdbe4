"""Terminal menu wrapper using simple-term-menu."""

from typing import Optional

import readchar
from rich.panel import Panel
from simple_term_menu import TerminalMenu

from sshlist.cli.ui.palettes import (
    DEFAULT_PALETTE,
    Palette,
    get_palette,
    rich_fg,
    rich_style,
    term_menu_style,
)
from sshlist.cli.ui.panels import clear_screen, console, show_cursor


class RichTerminalMenu:
    """Wrapper around simple-term-menu with Rich styling."""

    def __init__(self, backtitle: str = "", palette: Optional[Palette] = None):
        self.backtitle = backtitle
        self.palette = palette or get_palette(DEFAULT_PALETTE)

    def _print_panel(
        self,
        title: str,
        body: str,
        width: int = 100,
        height: Optional[int] = None,
    ) -> None:
        """Print the back-title line and a bordered panel."""
        if self.backtitle:
            console.print(self.backtitle, style=rich_fg(self.palette, "roottext"))
        console.print(
            Panel(
                body,
                title=f"[{rich_fg(self.palette, 'title')}]{title}[/]",
                border_style=rich_fg(self.palette, "border"),
                style=rich_style(self.palette, "textbox"),
                width=min(width, console.width),
                height=min(height, console.height) if height else None,
            )
        )

    def select(
        self,
        title: str,
        prompt: str,
        options: list[tuple[str, str]],
    ) -> Optional[str]:
        """Show selection menu.

        Args:
            title: Title shown in the panel border
            prompt: Text shown inside the panel
            options: (tag, label) pairs in display order

        Returns:
            Tag of the selected option or None if cancelled (Esc/q)
        """
        if not options:
            return None

        clear_screen()
        self._print_panel(title, prompt)
        console.print("[dim]↑↓ navigate • Enter select • q cancel[/dim]\n")

        menu = TerminalMenu(
            [label for _, label in options],
            cursor_index=0,
            menu_cursor="> ",
            menu_cursor_style=term_menu_style(self.palette, "actlistbox"),
            menu_highlight_style=term_menu_style(self.palette, "actlistbox"),
            cycle_cursor=True,
            clear_screen=False,
            raise_error_on_interrupt=True,
        )

        result = menu.show()
        show_cursor()
        if result is None:
            return None
        return options[result][0]

    def message(
        self,
        title: str,
        text: str,
        height: int = 10,
        width: int = 60,
    ) -> None:
        """Show a message panel and wait for any key.

        Args:
            title: Panel title
            text: Message body
            height: Panel height in rows
            width: Panel width in columns
        """
        clear_screen()
        self._print_panel(title, f"\n{text}", width=width, height=height)
        console.print("[dim]Press any key to continue...[/dim]")
        readchar.readkey()
        show_cursor()
