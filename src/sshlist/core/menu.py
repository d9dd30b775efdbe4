"""Menu model: immutable entries and the actions they dispatch to."""

from dataclasses import dataclass
from typing import Optional, Union

# Box-drawing prefixes, top to bottom
TOP_GLYPH = "┌──═"
MIDDLE_GLYPH = "├──═"
BOTTOM_GLYPH = "└──<"

QUIT_LABEL = f"{BOTTOM_GLYPH} Quit"


@dataclass(frozen=True)
class Connect:
    """Run the connect program against a host alias."""

    program: str
    host: str

    @property
    def argv(self) -> list[str]:
        return [self.program, self.host]


@dataclass(frozen=True)
class Quit:
    """Leave the menu loop."""


Action = Union[Connect, Quit]


@dataclass(frozen=True)
class HostEntry:
    index: int
    name: str
    label: str
    action: Connect


@dataclass(frozen=True)
class QuitEntry:
    index: int
    label: str = QUIT_LABEL
    action: Quit = Quit()


MenuEntry = Union[HostEntry, QuitEntry]


def host_label(position: int, host: str) -> str:
    """Label for the host at 1-based ``position``."""
    glyph = TOP_GLYPH if position == 1 else MIDDLE_GLYPH
    return f"{glyph} {host}"


def build_menu(hosts: list[str], program: str = "ssh") -> tuple[MenuEntry, ...]:
    """Build the ordered menu for ``hosts``, terminated by a Quit entry.

    Args:
        hosts: Host aliases in display order
        program: Connect program run for a selected host

    Returns:
        Tuple of HostEntry (indices 1..N) followed by QuitEntry (N+1)
    """
    entries: list[MenuEntry] = [
        HostEntry(
            index=i,
            name=host,
            label=host_label(i, host),
            action=Connect(program, host),
        )
        for i, host in enumerate(hosts, start=1)
    ]
    entries.append(QuitEntry(index=len(hosts) + 1))
    return tuple(entries)


def menu_options(menu: tuple[MenuEntry, ...]) -> list[tuple[str, str]]:
    """(tag, label) pairs for the menu renderer."""
    return [(str(entry.index), entry.label) for entry in menu]


def resolve_selection(
    menu: tuple[MenuEntry, ...], raw: Optional[str]
) -> Optional[MenuEntry]:
    """Map a raw selection to its entry.

    The tag must equal an entry index exactly; None for a cancel signal
    or anything else.
    """
    if raw is None:
        return None
    raw = raw.strip()
    for entry in menu:
        if raw == str(entry.index):
            return entry
    return None
