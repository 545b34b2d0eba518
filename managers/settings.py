"""
Settings Manager for NotchTabs.
Handles loading/saving application settings and building the notch configuration.
"""

import os
import json

from constants import (
    DEFAULT_SCREEN_RATIOS, DEFAULT_RATIO_TOLERANCE, DEFAULT_FULLSCREEN_HEIGHT,
    DEFAULT_NORMAL_HEIGHT, DEFAULT_MAX_HEIGHT, DEFAULT_TAB_STRIP_FORMAT, MIN_HEIGHT
)


class NotchConfig:
    """Read-only inputs of the height engine"""

    def __init__(self, screen_ratios=None, ratio_tolerance=DEFAULT_RATIO_TOLERANCE,
                 fullscreen_height=DEFAULT_FULLSCREEN_HEIGHT,
                 normal_height=DEFAULT_NORMAL_HEIGHT,
                 max_height=DEFAULT_MAX_HEIGHT, native_fullscreen=False):
        if screen_ratios is None:
            screen_ratios = list(DEFAULT_SCREEN_RATIOS)
        self.screen_ratios = screen_ratios
        self.ratio_tolerance = ratio_tolerance
        self.fullscreen_height = fullscreen_height
        self.normal_height = normal_height
        self.max_height = max_height
        self.native_fullscreen = native_fullscreen


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_screen_ratios(entries):
    """Validate screen ratio entries from settings.

    Accepts [ratio, percent] pairs or {"ratio": ..., "percent": ...} dicts.
    Malformed entries are skipped.

    Returns:
        list of (ratio, percent) tuples
    """
    ratios = []
    for entry in entries:
        if isinstance(entry, dict):
            ratio, percent = entry.get('ratio'), entry.get('percent')
        elif isinstance(entry, (list, tuple)) and len(entry) == 2:
            ratio, percent = entry
        else:
            print(f"Ignoring malformed screen ratio: {entry!r}")
            continue

        if not (_is_number(ratio) and _is_number(percent)) or ratio <= 0 or not 0 <= percent <= 100:
            print(f"Ignoring invalid screen ratio: {entry!r}")
            continue
        ratios.append((float(ratio), float(percent)))
    return ratios


class SettingsManager:
    """Manages application settings persistence."""

    def __init__(self, settings_file):
        self.settings_file = settings_file
        self._settings = {}

    def load(self):
        """Load settings from file.

        Returns:
            dict: Settings dictionary, or empty dict if file doesn't exist
        """
        if not os.path.exists(self.settings_file):
            self._settings = {}
            return {}

        try:
            with open(self.settings_file, 'r', encoding='utf-8') as f:
                settings = json.load(f)
        except (OSError, ValueError) as e:
            print(f"Failed to load settings: {e}")
            settings = {}

        if not isinstance(settings, dict):
            print("Failed to load settings: top level is not an object")
            settings = {}
        self._settings = settings
        return settings

    def save(self, settings):
        """Save settings to file.

        Args:
            settings: dict of settings to save
        """
        try:
            with open(self.settings_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            self._settings = settings
        except (OSError, TypeError) as e:
            print(f"Failed to save settings: {e}")

    def get(self, key, default=None):
        return self._settings.get(key, default)

    def update(self, **values):
        """Merge values into the current settings and save them"""
        settings = dict(self._settings)
        settings.update(values)
        self.save(settings)

    def get_notch_config(self):
        """Build a NotchConfig from the "notch" section, falling back to
        defaults for anything missing or malformed."""
        section = self.get('notch', {})
        if not isinstance(section, dict):
            print("Ignoring malformed notch settings")
            section = {}

        def number(key, default):
            value = section.get(key, default)
            if not _is_number(value) or value < 0:
                print(f"Invalid notch setting {key}={value!r}, using {default}")
                return default
            return float(value)

        entries = section.get('screen_ratios')
        if entries is None:
            screen_ratios = list(DEFAULT_SCREEN_RATIOS)
        elif isinstance(entries, list):
            screen_ratios = parse_screen_ratios(entries)
        else:
            print(f"Invalid notch setting screen_ratios={entries!r}, using defaults")
            screen_ratios = list(DEFAULT_SCREEN_RATIOS)

        max_height = number('max_height', DEFAULT_MAX_HEIGHT)
        if max_height < MIN_HEIGHT:
            print(f"max_height {max_height} is below {MIN_HEIGHT}, using {MIN_HEIGHT}")
            max_height = MIN_HEIGHT

        return NotchConfig(
            screen_ratios=screen_ratios,
            ratio_tolerance=number('ratio_tolerance', DEFAULT_RATIO_TOLERANCE),
            fullscreen_height=number('fullscreen_height', DEFAULT_FULLSCREEN_HEIGHT),
            normal_height=number('normal_height', DEFAULT_NORMAL_HEIGHT),
            max_height=max_height,
            native_fullscreen=bool(section.get('native_fullscreen', False)),
        )

    def get_strip_format(self):
        """Tab strip item names, or the default format if missing/malformed"""
        items = self.get('tab_strip_format')
        if isinstance(items, list) and all(isinstance(item, str) for item in items):
            return list(items)
        if items is not None:
            print(f"Invalid tab_strip_format {items!r}, using default")
        return list(DEFAULT_TAB_STRIP_FORMAT)

    def validate_geometry(self, geometry, screen_geometry):
        """Clamp a saved window geometry so it fits on the screen.

        Args:
            geometry: dict with x, y, width, height
            screen_geometry: QRect of available screen space

        Returns:
            dict with adjusted x, y, width, height, or None
        """
        if not geometry:
            return None

        width = min(geometry.get('width', 900), screen_geometry.width())
        height = min(geometry.get('height', 600), screen_geometry.height())
        screen_x, screen_y = screen_geometry.x(), screen_geometry.y()
        x = min(max(geometry.get('x', 100), screen_x), screen_x + screen_geometry.width() - width)
        y = min(max(geometry.get('y', 100), screen_y), screen_y + screen_geometry.height() - height)

        return {'x': x, 'y': y, 'width': width, 'height': height}
