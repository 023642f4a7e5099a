from __future__ import annotations

"""
Simple TCP REPL server for risp.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(+ 1 2)"}
- Response: {"ok": true, "result": ["3"]} or {"ok": false, "error": <message>}

`result` holds the lines the interactive shell would print for `code`,
diagnostics included. A single Interpreter (and so a single SymbolTable) is
shared by every client thread.
"""

import json
import logging
import socket
import threading
from typing import Any, Tuple

from risp.config import get_log_level, get_repl_address
from risp.interpreter import Interpreter

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None, interp: Interpreter | None = None):
        default_host, default_port = get_repl_address()
        self.host = host if host is not None else default_host
        self.port = port if port is not None else default_port
        self.interp = interp if interp is not None else Interpreter()

    def handle_request(self, raw: bytes) -> dict[str, Any]:
        """Answer one JSON request line."""
        try:
            req = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        if not isinstance(req, dict):
            return {"ok": False, "error": "Invalid request: expected a JSON object"}
        if req.get("cmd") != "eval":
            return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: code must be a string"}
        return {"ok": True, "result": self.interp.run_line(code)}

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("risp REPL listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.debug("client connected: %s:%d", *addr)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = self.handle_request(line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.debug("client disconnected: %s:%d", *addr)


if __name__ == "__main__":
    logging.basicConfig(level=get_log_level())
    ReplServer().serve_forever()
