from __future__ import annotations

import importlib.metadata
import logging
import subprocess
from pathlib import Path
from typing import NamedTuple, Optional

from .constants import EditorConstants

logger = logging.getLogger(__name__)

VERSION = "0.0.1"


class BuildInfo(NamedTuple):
    commit: Optional[str]
    date: Optional[str]
    dirty: bool


def _run_git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
        return out.decode().strip() or None
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None


def _from_git_repo() -> Optional[BuildInfo]:
    here = Path(__file__).resolve().parent
    root = _run_git(["rev-parse", "--show-toplevel"], cwd=here)
    if not root:
        return None
    commit = _run_git(["rev-parse", "HEAD"], cwd=Path(root))
    date = _run_git(["show", "-s", "--format=%cI", "HEAD"], cwd=Path(root))
    status = _run_git(["status", "--porcelain"], cwd=Path(root))
    return BuildInfo(commit=commit, date=date, dirty=bool(status))


def _from_embedded_file() -> Optional[BuildInfo]:
    # Generated at build time by hatch build hook
    try:
        from . import _build_info  # type: ignore
    except ImportError:
        return None
    commit = getattr(_build_info, "COMMIT", None)
    date = getattr(_build_info, "DATE", None)
    if commit or date:
        return BuildInfo(commit=commit, date=date, dirty=False)
    return None


def get_build_info() -> BuildInfo:
    # Priority: live git repo -> embedded file -> unknowns
    for getter in (_from_git_repo, _from_embedded_file):
        info = getter()
        if info and (info.commit or info.date):
            return info
    return BuildInfo(commit=None, date=None, dirty=False)


def get_version() -> str:
    """Installed distribution version, or the in-tree VERSION."""
    try:
        return importlib.metadata.version("modalview")
    except importlib.metadata.PackageNotFoundError:
        return VERSION


def get_version_string() -> str:
    info = get_build_info()
    if not info.commit:
        return get_version()
    dirty_suffix = "-dirty" if info.dirty else ""
    # Use short (7-character) git hashes
    return f"{get_version()} ({info.commit[:7]}{dirty_suffix} {info.date or 'unknown'})"


def banner_text() -> str:
    """Welcome text shown when no file is loaded."""
    return EditorConstants.BANNER_TEMPLATE.format(VERSION)
