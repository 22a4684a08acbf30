"""A line-echo chat over TCP: the server sends each message back reversed."""

from __future__ import annotations

import argparse
import socket
import sys
import threading
from typing import Iterable, Optional, Sequence, TextIO

DEFAULT_PORT = 5000
FRAME_SIZE = 50


def _encode(text: str) -> bytes:
    data = text.encode("utf-8")
    if len(data) >= FRAME_SIZE:
        raise ValueError(f"message longer than {FRAME_SIZE - 1} bytes")
    return data.ljust(FRAME_SIZE, b"\0")


def _decode(frame: bytes) -> str:
    return frame.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _recv_frame(conn: socket.socket) -> Optional[bytes]:
    """Read one frame; return None if the peer closed before sending any."""
    chunks = []
    remaining = FRAME_SIZE
    while remaining:
        chunk = conn.recv(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks) or None


def reverse_message(data: bytes) -> bytes:
    """Return the text before the first NUL byte, reversed."""
    return data.split(b"\0", 1)[0][::-1]


def handle_client(conn: socket.socket) -> None:
    """Answer each frame from ``conn`` with its reversal until it closes."""
    with conn:
        while (frame := _recv_frame(conn)) is not None:
            print(f"Received: {_decode(frame)}")
            reply = reverse_message(frame)
            print(f"Send: {_decode(reply)}")
            conn.sendall(reply.ljust(FRAME_SIZE, b"\0"))


def serve(host: str = "", port: int = DEFAULT_PORT) -> None:
    """Accept clients forever, each handled on its own thread."""
    with socket.create_server((host, port), backlog=10) as listener:
        print("[+]Bind Established")
        while True:
            conn, _ = listener.accept()
            threading.Thread(target=handle_client, args=(conn,), daemon=True).start()


def run_client(
    host: str, port: int, lines: Iterable[str], output: TextIO
) -> list[str]:
    """Send every word of ``lines`` to the server and return its replies."""
    replies = []
    with socket.create_connection((host, port)) as sock:
        for line in lines:
            for word in line.split():
                sock.sendall(_encode(word))
                frame = _recv_frame(sock)
                if frame is None:
                    raise ConnectionError("server closed the connection")
                reply = _decode(frame)
                output.write(f"Received message: {reply}\n")
                replies.append(reply)
    return replies


def server_main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the reversing chat server.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        serve(args.host, args.port)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"[-]Bind Failed: {exc}", file=sys.stderr)
        return 1
    return 0


def client_main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Chat with the reversing server.")
    parser.add_argument("host")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        run_client(args.host, args.port, sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        return 0
    except ValueError as exc:
        print(f"[-]Send Failed: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"[-]connection failed: {exc}", file=sys.stderr)
        return 1
    return 0