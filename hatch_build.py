"""Hatchling build hook that stamps the git commit into the package."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any, Optional

from hatchling.builders.hooks.plugin.interface import BuildHookInterface

BUILD_INFO_PATH = "modalview/_build_info.py"


def _git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        # Building from an sdist or without git is fine; the version
        # string just omits the commit.
        return None
    return out.decode().strip() or None


class CustomBuildHook(BuildHookInterface):
    """Writes modalview/_build_info.py and ships it as an artifact."""

    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        root = Path(self.root)
        commit = _git(["rev-parse", "HEAD"], root)
        date = _git(["show", "-s", "--format=%cI", "HEAD"], root)
        (root / BUILD_INFO_PATH).write_text(
            "# Auto-generated at build time.\n"
            f"COMMIT = {commit!r}\n"
            f"DATE = {date!r}\n",
            encoding="utf-8",
        )
        build_data.setdefault("artifacts", []).append(BUILD_INFO_PATH)
