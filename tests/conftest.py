"""Fixtures shared by the chessgui test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# No display on headless Linux: render Qt widgets offscreen.
if sys.platform.startswith("linux") and not (
    os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY")
):
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

UI_TESTS = Path(__file__).parent / "ui"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """The one QApplication every widget test runs under."""
    from PyQt6.QtWidgets import QApplication

    yield QApplication.instance() or QApplication([])


@pytest.fixture(autouse=True)
def _english_strings() -> Iterator[None]:
    """MainWindow switches the global locale; start and end each test in English."""
    from chessgui.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _close_windows(request: pytest.FixtureRequest) -> Iterator[None]:
    """Close windows a board/UI test left open."""
    if UI_TESTS not in Path(str(request.node.fspath)).parents:
        yield
        return

    app = request.getfixturevalue("qapp")
    yield
    for widget in app.topLevelWidgets():
        widget.close()
    app.processEvents()
