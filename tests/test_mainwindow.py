from datetime import datetime

from subsystem1.mainwindow import DEFAULT_TITLE, MainWindow


def _fixed_clock():
    return datetime(2024, 1, 1, 12, 34, 56)


def test_new_window_has_startup_log():
    window = MainWindow(clock=_fixed_clock)
    assert window.title == DEFAULT_TITLE
    assert window.log == ("[12:34:56] 分系统1界面已创建", "[12:34:56] 等待主系统命令...")
    assert window.visible is False


def test_add_log_message_is_timestamped_and_appended():
    window = MainWindow(clock=_fixed_clock)
    window.add_log_message("hello")
    assert window.log[-1] == "[12:34:56] hello"
    assert window.log_text.endswith("hello")


def test_refresh_updates_status_and_logs():
    window = MainWindow(clock=_fixed_clock)
    window.refresh()
    assert window.status == "状态：已刷新 - 12:34:56"
    assert window.log[-1].endswith("刷新状态按钮被点击")


def test_clear_log_leaves_only_notice():
    window = MainWindow(clock=_fixed_clock)
    window.add_log_message("one")
    window.clear_log()
    assert len(window.log) == 1
    assert window.log[0].endswith("日志已清空")


def test_show_and_close_toggle_visibility_and_emit():
    window = MainWindow()
    closed = []
    window.window_closed.connect(lambda: closed.append(True))
    window.show()
    assert window.visible is True
    window.close()
    assert window.visible is False
    assert closed == [True]