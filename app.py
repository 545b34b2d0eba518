#!/usr/bin/env python3
"""
NotchTabs - tabbed editor whose tab strip grows to fill the notch
Features: Multiple tabs, notch-aware tab strip height, non-native fullscreen
"""

import sys
import os

from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QPushButton,
    QStackedWidget, QPlainTextEdit
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QShortcut, QKeySequence, QGuiApplication

from constants import NOTCH_ITEM, NEW_TAB_ITEM, TABS_ITEM
from managers.height_engine import HeightEngine
from managers.settings import SettingsManager
from widgets.tab_strip import TabStrip

DEFAULT_SETTINGS_FILE = os.path.join(os.path.dirname(__file__), '.notchtabs_settings.json')


class NotchTabsWindow(QMainWindow):
    """Main editor window with a notch-aware tab strip"""

    def __init__(self, engine, settings_manager=None):
        super().__init__()
        self.engine = engine
        self.settings_manager = settings_manager
        self.untitled_count = 0
        self.other_windows = []  # Keeps windows opened from here alive
        self._restore_geometry = None  # Geometry before a non-native fullscreen

        self.init_ui()
        self.restore_geometry()
        self.new_tab()

    def init_ui(self):
        """Initialize the user interface"""
        self.setWindowTitle("NotchTabs")
        self.setGeometry(100, 100, 900, 600)

        central_widget = QWidget()
        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # Tab strip shares the engine's format list, so toggling items affects both
        self.tab_strip = TabStrip(self.engine.strip_format, self)
        self.tab_strip.register_renderer(NOTCH_ITEM, self.engine.render_marker)
        self.tab_strip.register_renderer(NEW_TAB_ITEM, self.create_new_tab_button)
        self.tab_strip.tab_bar.currentChanged.connect(self.switch_to_tab)
        self.tab_strip.tab_bar.tabCloseRequested.connect(self.close_tab)
        self.tab_strip.tab_bar.tabMoved.connect(self.on_tab_moved)
        main_layout.addWidget(self.tab_strip)

        self.content_stack = QStackedWidget()
        main_layout.addWidget(self.content_stack, 1)

        central_widget.setLayout(main_layout)
        self.setCentralWidget(central_widget)

        self.setup_shortcuts()

    def setup_shortcuts(self):
        """Setup keyboard shortcuts"""
        QShortcut(QKeySequence("Ctrl+T"), self).activated.connect(self.new_tab)
        QShortcut(QKeySequence("Ctrl+W"), self).activated.connect(self.close_current_tab)
        QShortcut(QKeySequence("Ctrl+N"), self).activated.connect(self.new_window)
        QShortcut(QKeySequence("F11"), self).activated.connect(self.toggle_fullscreen)
        QShortcut(QKeySequence("Ctrl+Shift+K"), self).activated.connect(self.toggle_notch_item)

    def create_new_tab_button(self, window):
        """Renderer for the new-tab strip item"""
        button = QPushButton("+")
        button.setToolTip("New tab (Ctrl+T)")
        button.setFixedSize(24, 24)
        button.setStyleSheet("QPushButton { border: none; font-weight: bold; }")
        button.clicked.connect(self.new_tab)
        return button

    def new_tab(self):
        """Open an empty editor page"""
        self.untitled_count += 1
        editor = QPlainTextEdit()
        self.content_stack.addWidget(editor)
        index = self.tab_strip.tab_bar.addTab(f"Untitled {self.untitled_count}")
        self.tab_strip.tab_bar.setCurrentIndex(index)
        self.content_stack.setCurrentWidget(editor)
        return editor

    def switch_to_tab(self, index):
        if 0 <= index < self.content_stack.count():
            self.content_stack.setCurrentIndex(index)

    def on_tab_moved(self, from_index, to_index):
        """Keep page order in sync with the tab bar after a drag"""
        widget = self.content_stack.widget(from_index)
        self.content_stack.removeWidget(widget)
        self.content_stack.insertWidget(to_index, widget)
        self.content_stack.setCurrentIndex(self.tab_strip.tab_bar.currentIndex())

    def close_tab(self, index):
        """Close a tab; the last one is replaced with a fresh page"""
        widget = self.content_stack.widget(index)
        if widget is None:
            return
        self.content_stack.removeWidget(widget)
        widget.deleteLater()
        self.tab_strip.tab_bar.removeTab(index)
        if self.tab_strip.tab_bar.count() == 0:
            self.new_tab()

    def close_current_tab(self):
        self.close_tab(self.tab_strip.tab_bar.currentIndex())

    def new_window(self):
        """Open another window sharing the same engine"""
        window = NotchTabsWindow(self.engine)
        window.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        self.other_windows.append(window)
        window.destroyed.connect(lambda: self.other_windows.remove(window))
        window.show()
        return window

    def toggle_fullscreen(self):
        """Toggle fullscreen, native or as a frameless window stretched over the screen"""
        if self.isFullScreen() or self.isMaximized():
            self.setWindowFlag(Qt.WindowType.FramelessWindowHint, False)
            self.showNormal()
            if self._restore_geometry is not None:
                self.setGeometry(self._restore_geometry)
                self._restore_geometry = None
        elif self.engine.config.native_fullscreen:
            self.showFullScreen()
        else:
            # Maximized alone stops at the menu bar/dock; the ratio must match the full screen
            self._restore_geometry = self.geometry()
            self.setWindowFlag(Qt.WindowType.FramelessWindowHint, True)
            self.setWindowState(self.windowState() | Qt.WindowState.WindowMaximized)
            self.show()
            self.setGeometry(self.screen().geometry())

    def toggle_notch_item(self):
        """Add or remove the notch item from every window's tab strip"""
        items = list(self.engine.strip_format)
        if NOTCH_ITEM in items:
            items.remove(NOTCH_ITEM)
        else:
            position = items.index(TABS_ITEM) + 1 if TABS_ITEM in items else 0
            items.insert(position, NOTCH_ITEM)
        self.tab_strip.set_format(items)

        for widget in QApplication.topLevelWidgets():
            if widget is self or not isinstance(widget, NotchTabsWindow):
                continue
            if widget.engine is self.engine:
                widget.tab_strip.rebuild()

    def restore_geometry(self):
        """Restore the saved window geometry, kept on screen"""
        if self.settings_manager is None:
            return
        screen = QGuiApplication.primaryScreen()
        if screen is None:
            return
        geo = self.settings_manager.validate_geometry(
            self.settings_manager.get('geometry'), screen.availableGeometry()
        )
        if geo:
            self.setGeometry(geo['x'], geo['y'], geo['width'], geo['height'])

    def save_settings(self):
        """Save window geometry and the tab strip format"""
        if self.settings_manager is None:
            return
        geometry = self.normalGeometry()
        self.settings_manager.update(
            geometry={
                'x': geometry.x(),
                'y': geometry.y(),
                'width': geometry.width(),
                'height': geometry.height()
            },
            tab_strip_format=list(self.engine.strip_format)
        )

    def closeEvent(self, event):
        self.save_settings()
        event.accept()


def create_engine(settings_manager):
    """Build the height engine from loaded settings"""
    return HeightEngine(settings_manager.get_notch_config(), settings_manager.get_strip_format())


def main():
    """Main application entry point"""
    app = QApplication(sys.argv)

    settings_file = DEFAULT_SETTINGS_FILE
    if len(sys.argv) > 1:
        settings_file = sys.argv[1]
        if not os.path.exists(settings_file):
            print(f"Warning: Settings file not found, it will be created: {settings_file}")

    settings_manager = SettingsManager(settings_file)
    settings_manager.load()

    window = NotchTabsWindow(create_engine(settings_manager), settings_manager)
    window.show()

    sys.exit(app.exec())


if __name__ == '__main__':
    main()
