"""Configuration model for garnet_launcher."""

from pathlib import Path

from pydantic import BaseModel, field_validator

DEFAULT_API_URL = "https://api.garnet.ai"
EVENT_GENERATOR_NAME = "event_generator"
DEFAULT_SOURCE_PATH = Path(".") / EVENT_GENERATOR_NAME
DEFAULT_INSTALL_DIR = Path("/usr/local/bin")


class LauncherConfig(BaseModel):
    """Resolved runtime configuration for one launcher run."""

    model_config = {"frozen": True}

    token: str
    api_url: str = DEFAULT_API_URL
    source_path: Path = DEFAULT_SOURCE_PATH
    install_dir: Path = DEFAULT_INSTALL_DIR
    debug: bool = False

    @field_validator("token")
    @classmethod
    def _token_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("token must not be empty")
        return value
