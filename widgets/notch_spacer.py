"""
Blank tab strip item that stretches the strip down past the notch.
"""

from PyQt6.QtWidgets import QWidget, QSizePolicy


class NotchSpacer(QWidget):
    """Invisible, fixed-height widget sized by a NotchStyle"""

    def __init__(self, notch_style, line_height, parent=None):
        super().__init__(parent)
        # Not named `style`: QWidget.style() already exists
        self.notch_style = notch_style
        self.line_height = line_height
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.setFixedWidth(1)

        notch_style.heightChanged.connect(self.apply_height)
        self.apply_height(notch_style.height)

    def apply_height(self, height):
        """Resize to `height` text lines (one line when unspecified)"""
        if height is None:
            height = 1.0
        self.setFixedHeight(max(1, round(height * self.line_height)))
