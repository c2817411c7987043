"""Launched child process model."""

import subprocess
from dataclasses import dataclass, field


@dataclass
class LaunchedProcess:
    """A started event generator that the launcher no longer waits on."""

    pid: int
    argv: list[str]
    process: subprocess.Popen | None = field(default=None, repr=False, compare=False)
