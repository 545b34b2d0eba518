"""
Per-window style handle for the notch spacer.
Each window gets its own named style whose height the tab strip follows.
"""

import itertools

from PyQt6.QtCore import QObject, Qt, pyqtSignal

# Dynamic property on a window holding the name of its style
STYLE_PROPERTY = 'notchStyleName'

# Process-wide, never reset: a recreated window must not pick up an old style
_style_ids = itertools.count(1)


def next_style_id():
    """Return the next unused style id"""
    return next(_style_ids)


class NotchStyle(QObject):
    """Named height resource read by the notch spacer of one window"""

    heightChanged = pyqtSignal(float)

    def __init__(self, style_id, parent=None):
        super().__init__(parent)
        self.style_id = style_id
        self.setObjectName(f'notch-spacer-{style_id}')
        self._height = None  # Unspecified until the engine first sets it

    @property
    def height(self):
        """Height multiplier in text lines, or None if never set"""
        return self._height

    def set_height(self, height):
        self._height = float(height)
        self.heightChanged.emit(self._height)


def style_for_window(window):
    """Return the style attached to a window, creating it on first use.

    The style is parented to the window, so it goes away with it.
    """
    name = window.property(STYLE_PROPERTY)
    if name:
        style = window.findChild(NotchStyle, name, Qt.FindChildOption.FindDirectChildrenOnly)
        if style is not None:
            return style

    style = NotchStyle(next_style_id(), window)
    window.setProperty(STYLE_PROPERTY, style.objectName())
    return style
