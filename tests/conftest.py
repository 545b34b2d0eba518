"""
Pytest configuration and fixtures for NotchTabs tests.
"""

import pytest
import sys
import os
from pathlib import Path
import tempfile
import shutil

# Add parent directory to path so we can import the modules
sys.path.insert(0, str(Path(__file__).parent.parent))

# Run Qt without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from PyQt6.QtWidgets import QApplication, QWidget
from PyQt6.QtCore import Qt


@pytest.fixture(scope='session')
def qapp():
    """Create QApplication instance for all tests"""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app
    # Don't quit the app here as it may be used by multiple tests


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    temp_path = tempfile.mkdtemp()
    yield temp_path
    # Cleanup after test
    shutil.rmtree(temp_path, ignore_errors=True)


class FakeWindow(QWidget):
    """Top-level widget reporting a chosen size and window state.

    The height engine reads geometry through these methods, so tests can
    pretend to be on any screen without showing a window.
    """

    def __init__(self, width=1200, height=800, state=Qt.WindowState.WindowNoState):
        super().__init__()
        self.fake_width = width
        self.fake_height = height
        self.fake_state = state

    def width(self):
        return self.fake_width

    def height(self):
        return self.fake_height

    def windowState(self):
        return self.fake_state


@pytest.fixture
def make_window(qapp):
    """Factory for FakeWindow instances, closed after the test"""
    windows = []

    def factory(*args, **kwargs):
        window = FakeWindow(*args, **kwargs)
        windows.append(window)
        return window

    yield factory
    for window in windows:
        window.close()
