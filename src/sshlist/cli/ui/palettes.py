"""Named colour palettes for the menu renderers.

Palettes are expressed in newt terms (element -> foreground, background)
so they can be exported as NEWT_COLORS for whiptail, and translated to
Rich and simple-term-menu styles for the terminal backend.
"""

import os

Palette = dict[str, tuple[str, str]]

DEFAULT_PALETTE = "main"

PALETTES: dict[str, Palette] = {
    "main": {
        "root": ("green", "black"),
        "window": ("black", "black"),
        "border": ("green", "black"),
        "textbox": ("green", "black"),
        "button": ("brightred", "black"),
        "checkbox": ("green", "black"),
        "listbox": ("brightgreen", "black"),
        "label": ("green", "black"),
        "title": ("brightgreen", "black"),
        "compactbutton": ("green", "black"),
        "actsellistbox": ("white", "black"),
        "actlistbox": ("brightred", "black"),
        "shadow": ("black", "green"),
        "entry": ("green", "black"),
        "helpline": ("white", "black"),
        "roottext": ("brown", "black"),
    },
    "red": {
        "root": ("red", "black"),
        "window": ("black", "black"),
        "border": ("red", "black"),
        "textbox": ("red", "black"),
        "button": ("brightred", "black"),
        "checkbox": ("red", "black"),
        "listbox": ("brightred", "black"),
        "label": ("black", "red"),
        "title": ("brightred", "black"),
        "compactbutton": ("red", "black"),
        "actsellistbox": ("white", "black"),
        "actlistbox": ("brightred", "black"),
        "shadow": ("black", "red"),
        "entry": ("red", "black"),
        "helpline": ("white", "black"),
        "roottext": ("brown", "black"),
    },
    "brown": {
        "root": ("green", "black"),
        "window": ("black", "yellow"),
        "border": ("green", "green"),
        "textbox": ("black", "yellow"),
        "button": ("white", "green"),
        "checkbox": ("brown", "black"),
        "listbox": ("black", "yellow"),
        "label": ("green", "green"),
        "title": ("white", "green"),
        "compactbutton": ("black", "yellow"),
        "actsellistbox": ("white", "red"),
        "actlistbox": ("black", "brown"),
        "shadow": ("yellow", "black"),
        "entry": ("white", "black"),
        "helpline": ("white", "black"),
        "roottext": ("green", "black"),
    },
}

# Alternative names accepted on the command line
ALIASES = {"green": "main"}

# newt colour name -> Rich colour name
_RICH_COLORS = {
    "brown": "yellow",
    "yellow": "bright_yellow",
    "lightgray": "white",
    "gray": "bright_black",
    "white": "bright_white",
}

# newt colour name -> simple-term-menu style
_TERM_MENU_COLORS = {
    "black": "black",
    "red": "red",
    "green": "green",
    "brown": "yellow",
    "yellow": "yellow",
    "blue": "blue",
    "magenta": "purple",
    "cyan": "cyan",
    "lightgray": "gray",
    "gray": "gray",
    "white": "gray",
}


def palette_names() -> list[str]:
    """All palette names, aliases included."""
    return sorted([*PALETTES, *ALIASES])


def get_palette(name: str) -> Palette:
    """Look up a palette by name, falling back to the default."""
    name = ALIASES.get(name, name)
    return PALETTES.get(name, PALETTES[DEFAULT_PALETTE])


def newt_colors(palette: Palette) -> str:
    """Render a palette in NEWT_COLORS format (one element=fg,bg per line)."""
    return "\n".join(f"{element}={fg},{bg}" for element, (fg, bg) in palette.items())


def apply_palette(name: str) -> Palette:
    """Export NEWT_COLORS for ``name`` and return the palette."""
    palette = get_palette(name)
    os.environ["NEWT_COLORS"] = newt_colors(palette)
    return palette


def _rich_color(color: str) -> str:
    if color.startswith("bright"):
        return "bright_" + color[len("bright") :]
    return _RICH_COLORS.get(color, color)


def rich_style(palette: Palette, element: str) -> str:
    """Rich style string ("fg on bg") for an element."""
    fg, bg = palette[element]
    return f"{_rich_color(fg)} on {_rich_color(bg)}"


def rich_fg(palette: Palette, element: str) -> str:
    """Rich foreground colour for an element."""
    return _rich_color(palette[element][0])


def term_menu_style(palette: Palette, element: str) -> tuple[str, ...]:
    """simple-term-menu style tuple for an element's foreground."""
    fg = palette[element][0]
    bold = fg.startswith("bright") or fg in ("white", "yellow")
    base = fg[len("bright") :] if fg.startswith("bright") else fg
    style = (f"fg_{_TERM_MENU_COLORS.get(base, 'gray')}",)
    return style + ("bold",) if bold else style
