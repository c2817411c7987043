import stat

import pytest


@pytest.fixture
def make_script(tmp_path):
    """Write an executable shell script and return its path."""

    def _make(body: str, name: str = "event_generator"):
        path = tmp_path / "src" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return _make
