"""A headless model of the subsystem's main window."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from .signals import Signal

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "分系统1"
TIME_FORMAT = "%H:%M:%S"


class MainWindow:
    """Window state: title, status line, visibility and a timestamped log."""

    def __init__(self, title: str = DEFAULT_TITLE, clock: Callable[[], datetime] = datetime.now) -> None:
        self.title = title
        self.status = ""
        self.visible = False
        self.window_closed = Signal("window_closed")
        self._clock = clock
        self._log: list[str] = []
        self.add_log_message("分系统1界面已创建")
        self.add_log_message("等待主系统命令...")
        logger.debug("分系统1界面已创建")

    @property
    def log(self) -> tuple[str, ...]:
        """The log lines, oldest first."""
        return tuple(self._log)

    @property
    def log_text(self) -> str:
        return "\n".join(self._log)

    def _timestamp(self) -> str:
        return self._clock().strftime(TIME_FORMAT)

    def add_log_message(self, message: str) -> None:
        """Append a message prefixed with the current time."""
        self._log.append(f"[{self._timestamp()}] {message}")

    def refresh(self) -> None:
        """Handle the refresh button: log it and update the status line."""
        self.add_log_message("刷新状态按钮被点击")
        self.status = "状态：已刷新 - " + self._timestamp()

    def clear_log(self) -> None:
        """Handle the clear-log button."""
        self._log.clear()
        self.add_log_message("日志已清空")

    def show(self) -> None:
        self.visible = True

    def close(self) -> None:
        """Hide the window and announce that it was closed."""
        logger.debug("分系统1界面关闭事件触发")
        self.visible = False
        self.window_closed.emit()