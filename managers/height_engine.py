"""
Tab strip height engine.

Decides how tall a window's tab strip should be so that, when the window
is stretched over a notched screen without native fullscreen, the strip
fills the area hidden behind the notch.
"""

from PyQt6.QtCore import Qt, QCoreApplication
from PyQt6.QtGui import QFontMetrics, QGuiApplication

from constants import EPSILON, MIN_HEIGHT, NOTCH_ITEM
from models.notch_style import style_for_window
from utils.ratio_matcher import RatioMatcher
from utils.resize_notifier import ResizeNotifier
from widgets.notch_spacer import NotchSpacer

FULLSCREEN_STATES = Qt.WindowState.WindowMaximized | Qt.WindowState.WindowFullScreen


def is_graphical():
    """True when a GUI application is running (widgets can be created)"""
    return isinstance(QCoreApplication.instance(), QGuiApplication)


class HeightEngine:
    """Computes and applies the notch-aware tab strip height per window"""

    def __init__(self, config, strip_format, notifier=None, matcher=None):
        """
        Args:
            config: NotchConfig with heights, ratios and native fullscreen flag
            strip_format: Shared list of active tab strip item names
            notifier: ResizeNotifier to subscribe to (created if omitted)
            matcher: RatioMatcher (built from config if omitted)
        """
        self.config = config
        self.strip_format = strip_format
        self.notifier = notifier if notifier is not None else ResizeNotifier()
        if matcher is None:
            matcher = RatioMatcher(config.screen_ratios, config.ratio_tolerance)
        self.matcher = matcher

    def is_fullscreen(self, window):
        """Heuristic: any maximized/fullscreen state counts, unless native
        fullscreen is on (the OS already keeps content below the notch)."""
        if self.config.native_fullscreen:
            return False
        return bool(window.windowState() & FULLSCREEN_STATES)

    def char_height(self, window):
        """Pixels per text line in the window's font"""
        return QFontMetrics(window.font()).height()

    def compute_multiplier(self, window):
        """Tab strip height for a window, in text lines, clamped to [1, max]"""
        if not self.is_fullscreen(window):
            multiplier = self.config.normal_height
        else:
            notch = self.matcher.notch_height_pixels(window.width(), window.height())
            char_height = self.char_height(window)
            if notch > 0 and char_height > 0:
                multiplier = notch / char_height
            else:
                multiplier = self.config.fullscreen_height

        return max(MIN_HEIGHT, min(multiplier, self.config.max_height))

    def refresh(self, window):
        """Resize listener: update the window's style if its height changed.

        Returns:
            bool: False once the notch item has been removed from the tab
            strip format, telling the notifier to drop this listener
        """
        if NOTCH_ITEM not in self.strip_format:
            return False

        style = style_for_window(window)
        current = style.height
        new = self.compute_multiplier(window)
        if current is None or abs(current - new) > EPSILON:
            style.set_height(new)
        return True

    def render_marker(self, window):
        """Tab strip renderer for the notch item.

        Returns a plain blank string outside a GUI, otherwise a NotchSpacer
        following the window's style.
        """
        if not is_graphical():
            return ' '

        if not self.notifier.has_listener(self.refresh):
            self.notifier.add_listener(self.refresh)
            # Geometry may have changed while unsubscribed
            self.refresh(window)

        return NotchSpacer(style_for_window(window), self.char_height(window))
