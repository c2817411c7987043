"""Failure kinds raised by the launcher pipeline."""


class LauncherError(Exception):
    """Base error; the CLI turns it into a log line and an exit status."""

    exit_code = 1


class ConfigError(LauncherError):
    """Required configuration is missing or invalid."""


class InstallError(LauncherError):
    """The event generator could not be copied into place."""


class LaunchError(LauncherError):
    """The event generator process could not be started."""
