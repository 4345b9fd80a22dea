from __future__ import annotations

"""
Simple TCP evaluation server for Wyas.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(+ 1 2)"}
- Response: {"ok": true, "result": "3"} or {"ok": false, "error": <message>}
- {"cmd": "read", "code": ...} answers with the parsed expression instead.

Evaluation is side-effect free, so every request is independent; the
interpreter only holds the read-only primitive table.
"""

import json
import logging
import socket
import threading
from typing import Any, Dict, Tuple

from wyas.config import get_log_level, get_repl_address
from wyas.errors import render_error
from wyas.interpreter import Interpreter
from wyas.printer import render

logger = logging.getLogger(__name__)

# Longest request line accepted, in bytes.
MAX_REQUEST_BYTES = 64 * 1024


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None):
        default_host, default_port = get_repl_address()
        self.host = host or default_host
        self.port = default_port if port is None else port
        self.interp = Interpreter()

    def handle_request(self, line: bytes) -> Dict[str, Any]:
        if len(line) > MAX_REQUEST_BYTES:
            return _too_long()
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        if not isinstance(req, dict):
            return {"ok": False, "error": "Invalid request: expected a JSON object"}

        cmd = req.get("cmd")
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: code must be a string"}
        if cmd == "eval":
            result = self.interp.eval(code)
        elif cmd == "read":
            result = self.interp.read(code)
        else:
            return {"ok": False, "error": f"Unknown cmd: {cmd}"}
        return result.fold(
            lambda error: {"ok": False, "error": render_error(error)},
            lambda value: {"ok": True, "result": render(value)},
        )

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _respond(self, line: bytes) -> Dict[str, Any]:
        try:
            return self.handle_request(line)
        except Exception as ex:
            logger.exception("request failed")
            return {"ok": False, "error": f"Internal error: {ex}"}

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.debug("client connected: %s", addr)
        with conn:
            buf = b""
            # set while skipping the rest of an oversized line
            discarding = False
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    if discarding:
                        discarding = False
                        continue
                    line = line.strip()
                    if not line:
                        continue
                    self._send(conn, self._respond(line))
                if len(buf) > MAX_REQUEST_BYTES:
                    if not discarding:
                        self._send(conn, _too_long())
                    discarding = True
                    buf = b""

    @staticmethod
    def _send(conn: socket.socket, resp: Dict[str, Any]):
        conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))


def _too_long() -> Dict[str, Any]:
    return {"ok": False, "error": f"Invalid request: line exceeds {MAX_REQUEST_BYTES} bytes"}


def main():
    logging.basicConfig(level=get_log_level(), format="%(message)s")
    ReplServer().serve_forever()


if __name__ == "__main__":
    main()
