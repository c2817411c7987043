from __future__ import annotations

import argparse
import os
import re
from pathlib import Path

import tomllib

import garnet_launcher

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"
TAG_RE = re.compile(r"v(\d+\.\d+\.\d+)")


def load_project_version(pyproject_path: Path = PYPROJECT) -> str:
    pyproject = tomllib.loads(pyproject_path.read_text(encoding="utf-8"))
    project_version = pyproject.get("project", {}).get("version")
    if not isinstance(project_version, str) or not project_version:
        raise SystemExit(f"Could not find project.version in {pyproject_path.name}")
    return project_version


def check_version_consistency(project_version: str, package_version: str | None = None) -> None:
    """Exit when pyproject.toml and garnet_launcher.__version__ disagree."""
    if package_version is None:
        package_version = garnet_launcher.__version__
    if package_version != project_version:
        raise SystemExit(
            f"Version mismatch: pyproject.toml has {project_version}, "
            f"garnet_launcher.__version__ is {package_version}"
        )


def validate_release_tag(ref_name: str, project_version: str) -> str:
    """Return the version encoded in ref_name, or exit when it does not match."""
    match = TAG_RE.fullmatch(ref_name)
    if match is None:
        raise SystemExit(
            f"Invalid release tag format. Expected vX.Y.Z (for example v1.2.3), got: {ref_name}"
        )

    tag_version = match.group(1)
    if tag_version != project_version:
        raise SystemExit(
            f"garnet-launcher release tag {ref_name} does not match project.version {project_version}"
        )
    return tag_version


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Check a release tag against pyproject.toml")
    parser.add_argument("tag", nargs="?", default=os.getenv("GITHUB_REF_NAME"))
    args = parser.parse_args(argv)
    if not args.tag:
        raise SystemExit("No tag given and GITHUB_REF_NAME is not set")
    project_version = load_project_version()
    check_version_consistency(project_version)
    version = validate_release_tag(args.tag, project_version)
    print(f"Release tag check passed: {args.tag} matches project.version {version}")


if __name__ == "__main__":
    main()
