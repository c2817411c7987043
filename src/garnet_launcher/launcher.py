"""Core logic for garnet_launcher."""

import logging

from garnet_launcher.install import install_artifact
from garnet_launcher.models import LaunchedProcess, LauncherConfig
from garnet_launcher.process import launch_event_generator

log = logging.getLogger(__name__)


def run(config: LauncherConfig) -> LaunchedProcess:
    """Install the event generator and start it with the resolved settings."""
    log.debug("source=%s install_dir=%s", config.source_path, config.install_dir)
    binary = install_artifact(config.source_path, config.install_dir)
    return launch_event_generator(binary, config.token, config.api_url)
