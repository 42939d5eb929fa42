"""Tests for version and banner strings."""

from unittest.mock import patch

from modalview import version
from modalview.version import BuildInfo


def test_banner_mentions_version():
    assert version.banner_text() == f"Modalview editor -- version {version.VERSION}"


def test_version_string_without_build_info():
    with patch.object(version, 'get_build_info', return_value=BuildInfo(None, None, False)), \
            patch.object(version, 'get_version', return_value="0.0.1"):
        assert version.get_version_string() == "0.0.1"


def test_version_string_with_commit():
    info = BuildInfo(commit="0123456789abcdef", date="2026-10-18T12:00:00+00:00", dirty=True)
    with patch.object(version, 'get_build_info', return_value=info), \
            patch.object(version, 'get_version', return_value="0.0.1"):
        assert version.get_version_string() == "0.0.1 (0123456-dirty 2026-10-18T12:00:00+00:00)"
