"""Command-line interface for garnet-launcher."""

import argparse
import logging
import sys
from pathlib import Path

from garnet_launcher import __version__
from garnet_launcher.config import load_config
from garnet_launcher.errors import LauncherError
from garnet_launcher.launcher import run

log = logging.getLogger("garnet_launcher")

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the launcher argument parser."""
    parser = argparse.ArgumentParser(
        prog="garnet-launcher",
        description="Install the GarnetAI event generator and start it in the background",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--source",
        type=Path,
        default=None,
        help="Bundled event generator to install (default: ./event_generator)",
    )
    parser.add_argument(
        "--install-dir",
        type=Path,
        default=None,
        help="Directory to install the event generator into (default: /usr/local/bin)",
    )
    return parser


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    logging.getLogger().setLevel(logging.DEBUG if debug else logging.INFO)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.debug)
    log.info("Starting GarnetAI Event Generator")

    try:
        config = load_config(
            source_path=args.source,
            install_dir=args.install_dir,
            debug=True if args.debug else None,
        )
        if config.debug:
            logging.getLogger().setLevel(logging.DEBUG)
        run(config)
    except LauncherError as e:
        log.error("%s", e)
        return e.exit_code

    log.info("GarnetAI event generator started successfully")
    return 0


def entrypoint() -> None:
    raise SystemExit(main())
