"""Shared console and screen helpers."""

from rich.console import Console

console = Console()


def clear_screen() -> None:
    """Clear terminal screen and hide cursor."""
    print("\033[?25l", end="", flush=True)  # Hide cursor
    console.clear()


def show_cursor() -> None:
    """Show the cursor (call after rendering)."""
    print("\033[?25h", end="", flush=True)
