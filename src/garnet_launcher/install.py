"""Copy the bundled event generator into the system binary directory."""

import logging
import os
from pathlib import Path

from garnet_launcher.errors import InstallError
from garnet_launcher.models import EVENT_GENERATOR_NAME

log = logging.getLogger(__name__)

INSTALL_MODE = 0o755


def _remove_stale(dest_path: Path) -> None:
    """Remove a previous install; failure is reported but not fatal."""
    if not dest_path.exists():
        return
    try:
        dest_path.unlink()
    except OSError as e:
        log.warning("Could not remove existing %s, overwriting in place: %s", dest_path, e)


def install_artifact(source_path: Path, install_dir: Path) -> Path:
    """Install source_path into install_dir and return the installed path."""
    dest_path = Path(install_dir) / EVENT_GENERATOR_NAME

    _remove_stale(dest_path)

    try:
        os.makedirs(install_dir, mode=INSTALL_MODE, exist_ok=True)
    except OSError as e:
        raise InstallError(f"failed to create directory: {e}") from e

    try:
        data = Path(source_path).read_bytes()
    except OSError as e:
        raise InstallError(f"failed to read source file: {e}") from e
    log.debug("read %d bytes from %s", len(data), source_path)

    try:
        fd = os.open(dest_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, INSTALL_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(dest_path, INSTALL_MODE)
    except OSError as e:
        raise InstallError(f"failed to write destination file: {e}") from e

    log.info("Event generator installed to: %s", dest_path)
    return dest_path
