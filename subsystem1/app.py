"""Entry point: the command server wired to the window manager."""

from __future__ import annotations

import argparse
import asyncio
import logging

from .tcpserver import DEFAULT_PORT, TcpServer
from .uimanager import UiManager

logger = logging.getLogger(__name__)


def build_application(port: int = DEFAULT_PORT) -> tuple[TcpServer, UiManager]:
    """Create the server and the window manager and connect their signals."""
    server = TcpServer(port=port)
    ui_manager = UiManager()
    server.show_ui_requested.connect(ui_manager.show_new_window)
    server.client_connected.connect(lambda address: logger.info("客户端连接: %s", address))
    server.client_disconnected.connect(lambda address: logger.info("客户端断开: %s", address))
    server.command_received.connect(
        lambda command, address: logger.info("收到命令: %s 来自: %s", command, address)
    )
    ui_manager.window_shown.connect(lambda: logger.info("界面已显示"))
    ui_manager.window_closed.connect(lambda: logger.info("界面已关闭"))
    ui_manager.all_windows_closed.connect(lambda: logger.info("所有界面已关闭"))
    return server, ui_manager


async def _serve(port: int, host: str) -> int:
    server, ui_manager = build_application(port)
    server.host = host
    try:
        await server.start()
    except OSError:
        logger.error("TCP服务端启动失败")
        return 1
    logger.info("TCP服务端启动成功，监听端口%d", server.port)
    logger.info("分系统1启动完成，等待主系统连接...")
    logger.info("支持的命令: /show_ui, /status, /help")
    try:
        await asyncio.Event().wait()
    finally:
        await server.stop()
        ui_manager.close_all_windows()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="subsystem1", description="Subsystem 1 command server.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    logger.info("=== 分系统1启动 ===")
    try:
        result = asyncio.run(_serve(args.port, args.host))
    except KeyboardInterrupt:
        result = 0
    logger.info("=== 分系统1退出 ===")
    return result


if __name__ == "__main__":
    raise SystemExit(main())