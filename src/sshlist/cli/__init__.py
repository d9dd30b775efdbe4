"""CLI entry point for sshlist.

Uses Typer for command routing. Running without a subcommand opens the
interactive host menu.
"""

from pathlib import Path
from typing import Optional

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="sshlist",
    help="Pick a host from your SSH config and connect to it",
    no_args_is_help=False,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="SSH client config to read (default: ~/.ssh/config)",
    ),
    palette: Optional[str] = typer.Option(
        None,
        "--palette",
        "-p",
        help="Colour palette: main, red or brown",
    ),
    ui: Optional[str] = typer.Option(
        None,
        "--ui",
        help="Menu backend: terminal or whiptail",
    ),
) -> None:
    """Launch interactive menu if no command given."""
    from sshlist.cli.helpers import load_config

    ctx.obj = load_config(config, palette, ui)
    if ctx.invoked_subcommand is None:
        from sshlist.cli.commands import cmd_menu

        raise typer.Exit(cmd_menu(ctx.obj))


@app.command()
def hosts(ctx: typer.Context) -> None:
    """Show the parsed host menu and exit."""
    from sshlist.cli.commands import cmd_hosts

    raise typer.Exit(cmd_hosts(ctx.obj))


@app.command()
def palettes() -> None:
    """List colour palettes."""
    from sshlist.cli.commands import cmd_palettes

    cmd_palettes()


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
