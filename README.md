# subsystem1

`subsystem1` is a small asyncio TCP service that a master system controls. It listens on
a port (8080 by default) and sends a welcome message to each client that connects. It
then answers plain-text commands. The `/show_ui` command opens a new numbered window
record. Each window keeps its own log, and each log line starts with a timestamp.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Running

```
subsystem1
subsystem1 --port 9000 --host 127.0.0.1
```

| Option   | Default   | Meaning                 |
|----------|-----------|-------------------------|
| `--port` | `8080`    | port to listen on       |
| `--host` | `0.0.0.0` | address to listen on    |

The service writes its progress to the log at INFO level. It runs until it is
interrupted, for example with Ctrl+C. On the way out it disconnects every client and
closes every window. If the port cannot be bound, the command exits with status 1.

Clients send commands as UTF-8 text. Each chunk of data that arrives is treated as one
command, and surrounding whitespace is removed before it is matched.

| Command    | Reply                                                        |
|------------|--------------------------------------------------------------|
| `/show_ui` | Opens a new window and answers `OK: 界面启动命令已执行`        |
| `/status`  | Answers `OK: ...` with the current number of clients         |
| `/help`    | Lists the supported commands                                 |
| other      | Answers `ERROR: 未知命令 '<command>'...` with a pointer to `/help` |

## Using it as a library

`subsystem1.app.build_application(port)` creates a `TcpServer` and a `UiManager` and
returns them as a pair. It connects them the same way the command does: a `/show_ui`
request opens a window, and the server's and manager's events are logged.

The pieces can also be used on their own:

- `subsystem1.tcpserver.TcpServer(host, port)` is started with `await start(port)`.
  `start` raises `OSError` if the port cannot be bound. If port 0 is given, the `port`
  attribute afterwards holds the port the server actually uses. Stop it with
  `await stop()`. `is_running` and `client_count` report its state.
  `process_command(command)` returns the reply text for a single command. The server's
  signals are `show_ui_requested`, `client_connected(address)`,
  `client_disconnected(address)` and `command_received(command, address)`.
- `subsystem1.uimanager.UiManager` opens windows titled `分系统1 - 界面 N` with
  `show_new_window()`, which returns the new window. `close_all_windows()` closes every
  window and restarts the numbering. `has_visible_windows()`, `windows` and
  `window_count` describe what is open. Its signals are `window_shown`,
  `window_closed` and `all_windows_closed`.
- `subsystem1.mainwindow.MainWindow` holds one window's `title`, `status`, `visible`
  flag and log (`log`, `log_text`). Its methods are `add_log_message`, `refresh`,
  `clear_log`, `show` and `close`. `close` emits `window_closed`. A clock callable can
  be passed in to fix the timestamps.
- `subsystem1.signals.Signal` is the small observer type that links these parts
  together. Call `connect(slot)` to attach a callback, `disconnect(slot)` to remove it,
  and `emit(*args)` to call every attached callback in the order they were attached.

## What it does not do

The windows are records kept in memory. `subsystem1` draws nothing on screen. A window's
title, status line, log and visibility can be read from the `MainWindow` object, but no
graphical interface displays them and no buttons exist to press. `refresh`, `clear_log`
and `close` take the place of those buttons.

## Tests

```
pytest
```