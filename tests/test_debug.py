"""Tests for debug logging."""

from sshlist.utils import debug as debug_module
from sshlist.utils.config import Config
from sshlist.utils.debug import configure, debug, debug_parse


def test_debug_disabled_by_default(mock_sshlist_dir, capsys):
    debug("parse", "hello")

    assert capsys.readouterr().err == ""
    assert not (mock_sshlist_dir / "debug.log").exists()


def test_debug_enabled_writes_file_and_stderr(mock_sshlist_dir, monkeypatch, capsys):
    monkeypatch.setenv("SSHLIST_DEBUG", "1")

    debug_parse("parsed hosts", count=2)

    err = capsys.readouterr().err
    assert "[sshlist:parse]" in err
    assert "parsed hosts | count=2" in err
    log = (mock_sshlist_dir / "debug.log").read_text()
    assert "parsed hosts" in log


def test_configured_config_wins_over_environment(temp_dir, capsys):
    """Logging follows the config handed over by the CLI."""
    config = Config(temp_dir / "elsewhere")
    config.debug = True
    configure(config)

    debug("menu", "built menu", entries=3)

    assert "built menu" in capsys.readouterr().err
    assert "built menu" in (temp_dir / "elsewhere" / "debug.log").read_text()


def test_configure_none_reloads_from_sshlist_dir(mock_sshlist_dir):
    config = Config(mock_sshlist_dir)
    configure(config)
    assert debug_module._get_config() is config

    configure(None)

    assert debug_module._get_config() is not config
