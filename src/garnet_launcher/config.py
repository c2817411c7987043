"""Resolve launcher configuration from the process environment."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from garnet_launcher.errors import ConfigError
from garnet_launcher.models import DEFAULT_API_URL, LauncherConfig

log = logging.getLogger(__name__)

TOKEN_ENV = "GARNETAI_API_TOKEN"
API_URL_ENV = "GARNETAI_API_URL"
DEBUG_ENV = "GARNETAI_DEBUG"


def _env_flag(value: str | None) -> bool:
    return (value or "").strip().lower() == "true"


def load_config(
    env: Mapping[str, str] | None = None,
    *,
    source_path: Path | None = None,
    install_dir: Path | None = None,
    debug: bool | None = None,
) -> LauncherConfig:
    """Build a LauncherConfig from environment values and CLI overrides."""
    environ = os.environ if env is None else env

    token = environ.get(TOKEN_ENV, "")
    if not token:
        raise ConfigError(f"{TOKEN_ENV} environment variable is required")

    api_url = environ.get(API_URL_ENV, "")
    if not api_url:
        api_url = DEFAULT_API_URL
        log.info("Using default API URL: %s", api_url)
    else:
        log.info("Using API URL: %s", api_url)

    overrides: dict = {}
    if source_path is not None:
        overrides["source_path"] = source_path
    if install_dir is not None:
        overrides["install_dir"] = install_dir

    try:
        return LauncherConfig(
            token=token,
            api_url=api_url,
            debug=_env_flag(environ.get(DEBUG_ENV)) if debug is None else debug,
            **overrides,
        )
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e
