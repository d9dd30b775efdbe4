"""Tests for SSH config host parsing."""

from sshlist.core.parser import parse_host_lines, parse_hosts


def test_parse_hosts_keeps_file_order(ssh_config):
    """Concrete hosts come back in the order they appear."""
    assert parse_hosts(ssh_config) == ["myserver", "devbox"]


def test_parse_hosts_accepts_string_path(ssh_config):
    assert parse_hosts(str(ssh_config)) == ["myserver", "devbox"]


def test_missing_file_yields_empty_list(temp_dir):
    """A missing config is not an error."""
    assert parse_hosts(temp_dir / "does-not-exist") == []


def test_directory_instead_of_file_yields_empty_list(temp_dir):
    """An unreadable path is treated as zero lines."""
    assert parse_hosts(temp_dir) == []


def test_empty_file_yields_empty_list(temp_dir):
    path = temp_dir / "config"
    path.write_text("")
    assert parse_hosts(path) == []


def test_wildcard_hosts_are_skipped():
    lines = ["Host *\n", "Host web-*\n", "Host db\n", "Host *.internal\n"]
    assert parse_host_lines(lines) == ["db"]


def test_lines_mentioning_match_are_skipped():
    """Any Host line containing 'Match' is dropped, wherever it appears."""
    lines = ["Host Matchbox\n", "Host alpha\n", "Host beta # Match me\n"]
    assert parse_host_lines(lines) == ["alpha"]


def test_only_first_alias_is_kept():
    """Host lines with several aliases yield only the first one."""
    assert parse_host_lines(["Host multi alias1 alias2\n"]) == ["multi"]


def test_host_must_start_the_line():
    """Indented Host lines and other directives are ignored."""
    lines = [
        "  Host indented\n",
        "HostName example.com\n",
        "host lowercase\n",
        "#Host commented\n",
        "Host\n",
        "Host\tviatab\n",
    ]
    assert parse_host_lines(lines) == ["viatab"]


def test_duplicates_are_kept():
    lines = ["Host a\n", "Host b\n", "Host a\n"]
    assert parse_host_lines(lines) == ["a", "b", "a"]


def test_non_utf8_bytes_do_not_break_parsing(temp_dir):
    path = temp_dir / "config"
    path.write_bytes(b"Host caf\xe9\nHost plain\n")
    hosts = parse_hosts(path)
    assert hosts[1] == "plain"
    assert len(hosts) == 2
