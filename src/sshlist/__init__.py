"""sshlist - Pick a host from your SSH config and connect to it."""

from importlib.metadata import version

__version__ = version("sshlist")

from sshlist.core.controller import MenuController
from sshlist.core.parser import parse_hosts

__all__ = [
    "MenuController",
    "parse_hosts",
]
