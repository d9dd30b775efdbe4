"""Base protocol for menu UI."""

from typing import Optional, Protocol


class MenuUI(Protocol):
    """Protocol for menu implementations.

    Allows swapping menu backends (terminal, whiptail).
    """

    def select(
        self,
        title: str,
        prompt: str,
        options: list[tuple[str, str]],
    ) -> Optional[str]:
        """Show (tag, label) options, return the chosen tag or None if cancelled."""
        ...

    def message(
        self,
        title: str,
        text: str,
        height: int = 10,
        width: int = 60,
    ) -> None:
        """Show a message and block until it is acknowledged."""
        ...
