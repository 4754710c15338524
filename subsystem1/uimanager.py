"""Keeps track of the windows opened on request of the main system."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial

from .mainwindow import MainWindow
from .signals import Signal

logger = logging.getLogger(__name__)


class UiManager:
    """Opens numbered windows and reports when they close."""

    def __init__(self, window_factory: Callable[[], MainWindow] = MainWindow) -> None:
        self._window_factory = window_factory
        self._windows: list[MainWindow] = []
        self._slots: dict[MainWindow, Callable[[], None]] = {}
        self._counter = 0
        self.window_shown = Signal("window_shown")
        self.window_closed = Signal("window_closed")
        self.all_windows_closed = Signal("all_windows_closed")

    @property
    def windows(self) -> tuple[MainWindow, ...]:
        return tuple(self._windows)

    @property
    def window_count(self) -> int:
        return len(self._windows)

    def show_new_window(self) -> MainWindow:
        """Create, title and show a new window, and return it."""
        window = self._window_factory()
        self._counter += 1
        window.title = f"分系统1 - 界面 {self._counter}"
        slot = partial(self._handle_window_closed, window)
        window.window_closed.connect(slot)
        self._slots[window] = slot
        self._windows.append(window)
        window.show()
        logger.info("显示新界面: %s ，当前界面数量: %d", window.title, len(self._windows))
        self.window_shown.emit()
        return window

    def close_all_windows(self) -> None:
        """Close every window and reset the title counter."""
        logger.info("关闭所有界面，当前界面数量: %d", len(self._windows))
        windows, self._windows = self._windows, []
        for window in windows:
            window.window_closed.disconnect(self._slots.pop(window))
            window.close()
        self._counter = 0
        self.all_windows_closed.emit()

    def has_visible_windows(self) -> bool:
        return any(window.visible for window in self._windows)

    def _handle_window_closed(self, window: MainWindow) -> None:
        if window not in self._windows:
            return
        self._windows.remove(window)
        window.window_closed.disconnect(self._slots.pop(window))
        logger.info("界面已关闭，当前界面数量: %d", len(self._windows))
        self.window_closed.emit()
        if not self._windows:
            logger.info("所有界面已关闭")
            self.all_windows_closed.emit()