"""Host alias extraction from an OpenSSH client config file."""

import re
from pathlib import Path
from typing import Union

from sshlist.utils.debug import debug_parse

# "Host" followed by whitespace; HostName and friends never match
HOST_LINE_RE = re.compile(r"^Host\s+")

# Lines mentioning either of these are not single concrete hosts
EXCLUDED_MARKERS = ("*", "Match")


def parse_host_lines(lines) -> list[str]:
    """Extract host aliases from config lines, in order.

    Only the first alias of a ``Host a b c`` line is kept. Duplicates are
    kept as-is.
    """
    hosts = []
    for line in lines:
        if not HOST_LINE_RE.match(line):
            continue
        if any(marker in line for marker in EXCLUDED_MARKERS):
            continue
        parts = line.split()
        if len(parts) < 2:
            continue
        hosts.append(parts[1])
    return hosts


def parse_hosts(path: Union[str, Path]) -> list[str]:
    """Parse host aliases from the SSH config at ``path``.

    Never raises: a missing or unreadable file yields an empty list.
    """
    config_path = Path(path).expanduser()
    try:
        with open(config_path, encoding="utf-8", errors="replace") as f:
            hosts = parse_host_lines(f)
    except OSError as e:
        debug_parse("config unreadable", path=config_path, error=e)
        return []

    debug_parse("parsed hosts", path=config_path, count=len(hosts))
    return hosts
