"""Start the installed event generator without waiting for it."""

import logging
import subprocess
from pathlib import Path

from garnet_launcher.errors import LaunchError
from garnet_launcher.models import LaunchedProcess

log = logging.getLogger(__name__)

REDACTED = "***"


def build_command(binary: Path | str, token: str, api_url: str) -> list[str]:
    """Return the argv used to start the event generator."""
    return [str(binary), "-token", token, "-url", api_url]


def redact_command(argv: list[str]) -> list[str]:
    """Return a copy of argv with the token value masked."""
    redacted = list(argv)
    i = 0
    while i < len(redacted) - 1:
        if redacted[i] == "-token":
            redacted[i + 1] = REDACTED
            i += 2
            continue
        i += 1
    return redacted


def launch_event_generator(binary: Path | str, token: str, api_url: str) -> LaunchedProcess:
    """Start the event generator in the background and return its pid."""
    argv = build_command(binary, token, api_url)
    log.debug("$ %s", " ".join(redact_command(argv)))
    try:
        # stdout/stderr are inherited; the child is never waited on.
        process = subprocess.Popen(argv, stdin=subprocess.DEVNULL)
    except OSError as e:
        raise LaunchError(f"failed to start event generator: {e}") from e

    log.info("Event generator process started with PID: %d", process.pid)
    # Handle kept so callers can poll or reap the child.
    return LaunchedProcess(pid=process.pid, argv=argv, process=process)
