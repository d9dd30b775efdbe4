"""Shared pytest fixtures."""

import os
import tempfile
from pathlib import Path
from typing import Optional

import pytest

from sshlist.utils.debug import configure as configure_debug

SAMPLE_SSH_CONFIG = """\
# personal hosts
Host myserver
    HostName 10.0.0.1
    User admin

Host devbox
    HostName devbox.local
    Port 2222

Host *
    ServerAliveInterval 60

Match host foo
    User bar
"""


class FakeMenuUI:
    """In-memory MenuUI that replays scripted selections.

    Records every menu shown and every message box, so tests can assert
    on what the user would have seen.
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.menus: list[list[tuple[str, str]]] = []
        self.messages: list[tuple[str, str]] = []

    def select(
        self,
        title: str,
        prompt: str,
        options: list[tuple[str, str]],
    ) -> Optional[str]:
        self.menus.append(options)
        if not self.answers:
            raise AssertionError("menu shown more often than scripted")
        return self.answers.pop(0)

    def message(
        self,
        title: str,
        text: str,
        height: int = 10,
        width: int = 60,
    ) -> None:
        self.messages.append((title, text))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def mock_sshlist_dir(temp_dir, monkeypatch):
    """Point SSHLIST_DIR at a temp dir and drop SSHLIST_* overrides."""
    for key in list(os.environ):
        if key.startswith("SSHLIST_"):
            monkeypatch.delenv(key)
    sshlist_dir = temp_dir / ".sshlist"
    sshlist_dir.mkdir()
    monkeypatch.setenv("SSHLIST_DIR", str(sshlist_dir))
    configure_debug(None)
    yield sshlist_dir
    configure_debug(None)


@pytest.fixture
def ssh_config(temp_dir):
    """Write a sample SSH client config and return its path."""
    path = temp_dir / "ssh_config"
    path.write_text(SAMPLE_SSH_CONFIG)
    return path


@pytest.fixture
def fake_ui():
    """Factory for FakeMenuUI instances."""
    return FakeMenuUI
