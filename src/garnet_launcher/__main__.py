"""Module entrypoint for `python -m garnet_launcher`."""

from garnet_launcher.cli import main

raise SystemExit(main())
