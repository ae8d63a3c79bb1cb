"""Shared fixtures: sample manifests and a clean CLI argument cache."""

from __future__ import annotations

from pathlib import Path

import pytest

from android_build_props.utils.cli_tools import getArgs


FULL_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns:android="http://schemas.android.com/apk/res/android"
    package="com.example.myapp"
    android:versionCode="42"
    android:versionName="1.2.0">
    <uses-permission android:name="android.permission.INTERNET" />
    <application android:label="My App" />
</manifest>
"""

BARE_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns:android="http://schemas.android.com/apk/res/android">
    <application />
</manifest>
"""


@pytest.fixture(autouse=True)
def reset_cli_args(monkeypatch: pytest.MonkeyPatch) -> None:
    """Each test starts without a parsed command line."""
    monkeypatch.delattr(getArgs, "parsed_args", raising=False)


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    path = tmp_path / "AndroidManifest.xml"
    path.write_text(FULL_MANIFEST, encoding="utf-8")
    return path


@pytest.fixture
def bare_manifest_path(tmp_path: Path) -> Path:
    path = tmp_path / "AndroidManifest.xml"
    path.write_text(BARE_MANIFEST, encoding="utf-8")
    return path
