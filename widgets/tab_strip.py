"""
Horizontal tab strip shown above the editor pages.
Lays out its items from a shared, ordered list of item names.
"""

from PyQt6.QtWidgets import QWidget, QHBoxLayout, QTabBar, QLabel
from PyQt6.QtCore import Qt

from constants import TABS_ITEM


class TabStrip(QWidget):
    """Tab bar plus extra items rendered from the strip format"""

    def __init__(self, strip_format, parent=None):
        super().__init__(parent)
        self.format = strip_format  # Shared with the height engine; mutated in place
        self.renderers = {}  # Item name -> callable(window) returning QWidget or str
        self.item_widgets = []  # Widgets rendered for the current format

        self.tab_bar = QTabBar(self)
        self.tab_bar.setTabsClosable(True)
        self.tab_bar.setMovable(True)
        self.tab_bar.setExpanding(False)

        self.strip_layout = QHBoxLayout()
        self.strip_layout.setContentsMargins(4, 0, 4, 0)
        self.strip_layout.setSpacing(4)
        self.setLayout(self.strip_layout)

        self.setStyleSheet("QWidget { background-color: #E8E8E8; }")

        # Items are rendered on first show, once the strip belongs to its window
        self._built = False

    def showEvent(self, event):
        super().showEvent(event)
        if not self._built:
            self.rebuild()

    def register_renderer(self, name, renderer):
        """Register the renderer used for a strip item name"""
        self.renderers[name] = renderer
        if self._built:
            self.rebuild()

    def set_format(self, items):
        """Replace the strip format (in place, so other holders see it) and rebuild"""
        self.format[:] = items
        self.rebuild()

    def rebuild(self):
        """Re-render every item of the current format"""
        self.strip_layout.removeWidget(self.tab_bar)
        for widget in self.item_widgets:
            self.strip_layout.removeWidget(widget)
            widget.hide()
            widget.deleteLater()
        self.item_widgets = []
        while self.strip_layout.count():
            self.strip_layout.takeAt(0)

        window = self.window()
        self.tab_bar.setVisible(TABS_ITEM in self.format)

        for name in self.format:
            if name == TABS_ITEM:
                self.strip_layout.addWidget(self.tab_bar, 0, Qt.AlignmentFlag.AlignBottom)
                continue

            renderer = self.renderers.get(name)
            if renderer is None:
                print(f"Unknown tab strip item: {name}")
                continue

            unit = renderer(window)
            if isinstance(unit, str):
                unit = QLabel(unit)
            self.item_widgets.append(unit)
            self.strip_layout.addWidget(unit, 0, Qt.AlignmentFlag.AlignBottom)

        self.strip_layout.addStretch()
        self._built = True
