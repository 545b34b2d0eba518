"""
Window resize notifications.

Watches the application windows of the running application (not tooltips
or popup menus) for resize and window state changes, and calls the
registered listeners with the window.
A listener that returns False is unsubscribed.
"""

from PyQt6.QtCore import QObject, QEvent, QCoreApplication, Qt


class ResizeNotifier(QObject):
    """Dispatches top-level window resizes to listeners"""

    WATCHED_EVENTS = (QEvent.Type.Resize, QEvent.Type.WindowStateChange)

    # Tooltips, popup menus and the like are not application windows
    WATCHED_WINDOW_TYPES = (Qt.WindowType.Window, Qt.WindowType.Dialog)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._listeners = []
        self._installed_on = None  # Application the event filter is installed on

    def add_listener(self, listener):
        """Subscribe a listener; adding the same listener twice is a no-op"""
        if listener in self._listeners:
            return
        self._listeners.append(listener)
        self._install()

    def remove_listener(self, listener):
        if listener in self._listeners:
            self._listeners.remove(listener)
        if not self._listeners:
            self._uninstall()

    def has_listener(self, listener):
        return listener in self._listeners

    def notify(self, window):
        """Call every listener with the window, dropping those that return False"""
        for listener in list(self._listeners):
            try:
                keep = listener(window)
            except Exception as e:
                print(f"Error in resize listener: {e}")
                continue
            if keep is False:
                self.remove_listener(listener)

    def eventFilter(self, obj, event):
        if event.type() not in self.WATCHED_EVENTS or not obj.isWidgetType():
            return False
        if obj.isWindow() and obj.windowType() in self.WATCHED_WINDOW_TYPES:
            self.notify(obj)
        return False

    def _install(self):
        app = QCoreApplication.instance()
        if app is None or self._installed_on is app:
            return
        app.installEventFilter(self)
        self._installed_on = app

    def _uninstall(self):
        if self._installed_on is not None:
            self._installed_on.removeEventFilter(self)
            self._installed_on = None
