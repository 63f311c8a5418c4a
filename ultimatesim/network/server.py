"""Server-authoritative TCP and UDP endpoints."""

from __future__ import annotations

import logging
import socket
import threading

logger = logging.getLogger(__name__)

_POLL_INTERVAL = 0.1
_BUFFER_SIZE = 1024


def _parse_port(port: str, kind: str) -> int:
    try:
        value = int(port)
    except ValueError:
        raise OSError(f"invalid {kind} port {port!r}") from None
    if not 0 <= value <= 65535:
        raise OSError(f"invalid {kind} port {port!r}")
    return value


class Server:
    """TCP stream endpoint plus UDP datagram endpoint with client tracking.

    Ports are given as strings; "0" picks a free port, reported in
    bound_tcp_port and bound_udp_port after start().
    """

    def __init__(self, tcp_port: str = "0", udp_port: str = "0") -> None:
        self.tcp_port = str(tcp_port)
        self.udp_port = str(udp_port)
        self.bound_tcp_port = 0
        self.bound_udp_port = 0
        self._tcp_listener: socket.socket | None = None
        self._udp_socket: socket.socket | None = None
        self._clients: dict[str, socket.socket] = {}
        self._udp_clients: dict[str, tuple] = {}
        self._lock = threading.RLock()
        self._stopped = threading.Event()
        self._threads: list[threading.Thread] = []

    def __enter__(self) -> Server:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def start(self) -> None:
        """Bind both endpoints and begin serving in background threads."""
        tcp_port = _parse_port(self.tcp_port, "TCP")
        try:
            listener = socket.create_server(("", tcp_port))
        except OSError as exc:
            raise OSError(f"failed to start TCP server on :{self.tcp_port}: {exc}") from exc

        try:
            udp_port = _parse_port(self.udp_port, "UDP")
            udp_socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            try:
                udp_socket.bind(("", udp_port))
            except OSError:
                udp_socket.close()
                raise
        except OSError as exc:
            listener.close()
            raise OSError(f"failed to start UDP server on {self.udp_port}: {exc}") from exc

        listener.settimeout(_POLL_INTERVAL)
        udp_socket.settimeout(_POLL_INTERVAL)
        self._tcp_listener = listener
        self._udp_socket = udp_socket
        self.bound_tcp_port = listener.getsockname()[1]
        self.bound_udp_port = udp_socket.getsockname()[1]
        self._stopped.clear()

        for target in (self._accept_tcp, self._listen_udp):
            thread = threading.Thread(target=target, daemon=True)
            thread.start()
            self._threads.append(thread)

    def stop(self) -> None:
        """Close all sockets and forget every known client."""
        self._stopped.set()
        if self._tcp_listener is not None:
            self._tcp_listener.close()
        if self._udp_socket is not None:
            self._udp_socket.close()
        with self._lock:
            for conn in self._clients.values():
                conn.close()
            self._clients = {}
            self._udp_clients = {}
        for thread in self._threads:
            thread.join(timeout=1.0)
        self._threads = []

    def _accept_tcp(self) -> None:
        listener = self._tcp_listener
        while not self._stopped.is_set():
            try:
                conn, addr = listener.accept()
            except socket.timeout:
                continue
            except OSError as exc:
                if self._stopped.is_set():
                    return
                logger.warning("TCP accept error: %s", exc)
                continue
            conn.settimeout(_POLL_INTERVAL)
            key = f"{addr[0]}:{addr[1]}"
            with self._lock:
                self._clients[key] = conn
            threading.Thread(target=self._handle_tcp, args=(key, conn), daemon=True).start()

    def _handle_tcp(self, key: str, conn: socket.socket) -> None:
        try:
            while not self._stopped.is_set():
                try:
                    data = conn.recv(_BUFFER_SIZE)
                except socket.timeout:
                    continue
                except OSError:
                    return
                if not data:
                    return
        finally:
            with self._lock:
                if self._clients.get(key) is conn:
                    del self._clients[key]
            conn.close()

    def _listen_udp(self) -> None:
        udp_socket = self._udp_socket
        while not self._stopped.is_set():
            try:
                _data, addr = udp_socket.recvfrom(_BUFFER_SIZE)
            except socket.timeout:
                continue
            except OSError as exc:
                if self._stopped.is_set():
                    return
                logger.warning("UDP read error: %s", exc)
                continue
            with self._lock:
                self._udp_clients[f"{addr[0]}:{addr[1]}"] = addr

    def broadcast_tcp(self, payload: bytes) -> None:
        """Send payload to every TCP client, closing those that fail."""
        with self._lock:
            for key, conn in list(self._clients.items()):
                try:
                    conn.sendall(payload)
                except OSError as exc:
                    logger.warning("broadcast TCP error for %s: %s", key, exc)
                    conn.close()

    def broadcast_udp(self, payload: bytes) -> None:
        """Send payload to every UDP client that has contacted the server."""
        with self._lock:
            if self._udp_socket is None:
                return
            for key, addr in list(self._udp_clients.items()):
                try:
                    self._udp_socket.sendto(payload, addr)
                except OSError as exc:
                    logger.warning("broadcast UDP error for %s: %s", key, exc)