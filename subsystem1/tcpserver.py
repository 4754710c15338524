"""The command server that the main system connects to."""

from __future__ import annotations

import asyncio
import logging
import socket
from typing import Any

from .signals import Signal

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080
READ_SIZE = 65536

WELCOME_MESSAGE = "欢迎连接到分系统1！"
SHOW_UI_RESPONSE = "OK: 界面启动命令已执行"
HELP_TEXT = (
    "支持的命令:\n"
    "/show_ui - 启动前端界面\n"
    "/status - 查看系统状态\n"
    "/help - 显示帮助信息"
)


def _format_peer(peer: Any) -> str:
    if isinstance(peer, tuple) and len(peer) >= 2:
        return f"{peer[0]}:{peer[1]}"
    return str(peer)


class TcpServer:
    """Accepts TCP clients, answers their text commands and emits signals."""

    def __init__(self, host: str = "0.0.0.0", port: int = DEFAULT_PORT) -> None:
        self.host = host
        self.port = port
        self._server: asyncio.AbstractServer | None = None
        self._clients: list[asyncio.StreamWriter] = []
        self.show_ui_requested = Signal("show_ui_requested")
        self.client_connected = Signal("client_connected")
        self.client_disconnected = Signal("client_disconnected")
        self.command_received = Signal("command_received")

    @property
    def is_running(self) -> bool:
        return self._server is not None

    @property
    def client_count(self) -> int:
        return len(self._clients)

    async def start(self, port: int | None = None) -> None:
        """Start listening; raises OSError if the port cannot be bound."""
        if self.is_running:
            logger.info("TCP服务端已经在运行")
            return
        if port is not None:
            self.port = port
        try:
            server = await asyncio.start_server(self._handle_client, self.host, self.port)
        except OSError as exc:
            logger.error("TCP服务端启动失败: %s", exc)
            raise
        self._server = server
        if server.sockets:
            self.port = server.sockets[0].getsockname()[1]
        logger.info("TCP服务端启动成功，监听端口: %d", self.port)
        self._log_local_addresses()

    def _log_local_addresses(self) -> None:
        try:
            infos = socket.getaddrinfo(socket.gethostname(), None, socket.AF_INET)
        except OSError:
            return
        for address in sorted({info[4][0] for info in infos}):
            if address != "127.0.0.1":
                logger.info("本机IP地址: %s : %d", address, self.port)

    async def stop(self) -> None:
        """Disconnect every client and stop listening."""
        if self._server is None:
            return
        clients, self._clients = self._clients, []
        for writer in clients:
            writer.close()
        server, self._server = self._server, None
        server.close()
        await server.wait_closed()
        logger.info("TCP服务端已停止")

    def process_command(self, command: str) -> str:
        """Execute one command and return the response text."""
        if command == "/show_ui":
            logger.info("收到show_ui命令，准备启动界面")
            self.show_ui_requested.emit()
            return SHOW_UI_RESPONSE
        if command == "/status":
            return f"OK: 分系统1运行正常，当前连接数: {len(self._clients)}"
        if command == "/help":
            return HELP_TEXT
        return f"ERROR: 未知命令 '{command}'，输入 /help 查看支持的命令"

    async def _handle_client(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        address = _format_peer(writer.get_extra_info("peername"))
        self._clients.append(writer)
        logger.info("新客户端连接: %s", address)
        self.client_connected.emit(address)
        try:
            await self._send(WELCOME_MESSAGE, writer, address)
            while True:
                data = await reader.read(READ_SIZE)
                if not data:
                    break
                command = data.decode("utf-8", errors="replace").strip()
                logger.info("收到来自 %s 的命令: %s", address, command)
                self.command_received.emit(command, address)
                await self._send(self.process_command(command), writer, address)
        except ConnectionError:
            pass
        finally:
            if writer in self._clients:
                self._clients.remove(writer)
                logger.info("客户端断开连接: %s", address)
                self.client_disconnected.emit(address)
            writer.close()

    async def _send(self, response: str, writer: asyncio.StreamWriter, address: str) -> None:
        if writer.is_closing():
            return
        writer.write(response.encode("utf-8"))
        try:
            await writer.drain()
        except ConnectionError:
            return
        logger.debug("发送响应给 %s : %s", address, response)