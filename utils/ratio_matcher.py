"""
Screen ratio lookup for notched displays.

Matches a window's aspect ratio against a table of known notched screens
and converts the matching entry's notch percentage into pixels.
"""

from constants import DEFAULT_SCREEN_RATIOS, DEFAULT_RATIO_TOLERANCE


class RatioMatcher:
    """Looks up notch height for a screen by its width/height ratio"""

    def __init__(self, screen_ratios=None, tolerance=DEFAULT_RATIO_TOLERANCE):
        if screen_ratios is None:
            screen_ratios = DEFAULT_SCREEN_RATIOS
        self.screen_ratios = [(float(ratio), float(percent)) for ratio, percent in screen_ratios]
        self.tolerance = tolerance

    def match(self, width, height):
        """Find the notch percentage for a screen size.

        Args:
            width: Screen width in pixels
            height: Screen height in pixels (must be nonzero)

        Returns:
            float: Notch height as a percentage of screen height, or None
            if no table entry is within tolerance
        """
        ratio = width / height
        for entry_ratio, percent in self.screen_ratios:
            if abs(ratio - entry_ratio) <= self.tolerance:
                return percent
        return None

    def notch_height_pixels(self, width, height):
        """Notch height in pixels for a screen size, 0 when there is no notch"""
        percent = self.match(width, height)
        if percent is None:
            return 0
        return round(height * percent / 100)
