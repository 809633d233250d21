"""Shared pytest fixtures."""

import os
from pathlib import Path

import pytest
from PyQt6.QtCore import QSettings

from swatchpick.config.settings import AppSettings

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture()
def settings(tmp_path: Path) -> AppSettings:
    """AppSettings backed by a throwaway INI file."""
    qs = QSettings(str(tmp_path / "swatchpick.ini"), QSettings.Format.IniFormat)
    return AppSettings(qs)
