"""Model package for garnet_launcher."""

from garnet_launcher.models.launched_process import LaunchedProcess
from garnet_launcher.models.launcher_config import (
    DEFAULT_API_URL,
    DEFAULT_INSTALL_DIR,
    DEFAULT_SOURCE_PATH,
    EVENT_GENERATOR_NAME,
    LauncherConfig,
)

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_INSTALL_DIR",
    "DEFAULT_SOURCE_PATH",
    "EVENT_GENERATOR_NAME",
    "LaunchedProcess",
    "LauncherConfig",
]
