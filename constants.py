"""
Constants used throughout the NotchTabs application.
"""

# Known notched displays: (width / height ratio, notch height as % of screen height)
# 14" MacBook Pro (3024x1964) and 16" MacBook Pro (3456x2234)
DEFAULT_SCREEN_RATIOS = [
    (1.539, 3.513),
    (1.547, 3.088),
]

# Allowed absolute difference when matching a window ratio against the table
DEFAULT_RATIO_TOLERANCE = 0.001

# Two heights closer than this are considered equal (avoids redundant re-renders)
EPSILON = 1e-6

# Tab strip heights, in text lines
DEFAULT_FULLSCREEN_HEIGHT = 1.0
DEFAULT_NORMAL_HEIGHT = 1.0
DEFAULT_MAX_HEIGHT = 5.0
MIN_HEIGHT = 1.0

# Tab strip items
TABS_ITEM = 'tabs'
NOTCH_ITEM = 'notch'
NEW_TAB_ITEM = 'new_tab'
DEFAULT_TAB_STRIP_FORMAT = [TABS_ITEM, NOTCH_ITEM, NEW_TAB_ITEM]
