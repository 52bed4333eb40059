"""HTTP frontend — POST /results judges a batch of hands.

Request:  {"hands": ["s1, s10, s11, s12, s13", ...]}
Response: {"results": [...], "errors": [...]}

A body that is not a JSON batch gets 400; a storage or other server-side
failure gets 500 with a generic message and the detail goes to the log.
"""

from __future__ import annotations

import json
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from pokerhands.core.errors import MalformedRequestError
from pokerhands.core.judge import HandJudge
from pokerhands.core.messages import request_message
from pokerhands.core.request import decode_request

logger = logging.getLogger(__name__)

RESULTS_PATH = "/results"


class HandsHandler(BaseHTTPRequestHandler):
    judge: HandJudge  # set on the server-specific subclass by make_server

    def log_message(self, format, *args):
        logger.debug("%s - %s", self.address_string(), format % args)

    def do_POST(self):
        if self.path != RESULTS_PATH:
            self.send_error(404)
            return

        language = self.judge.language

        try:
            hands = decode_request(self._read_body())
        except MalformedRequestError as exc:
            logger.info("Rejected malformed request: %s", exc)
            self._send_json(400, {"message": request_message("invalid_format", language)})
            return

        try:
            judgement = self.judge.judge(hands)
        except Exception:
            logger.exception("Failed to judge %d hand(s)", len(hands))
            self._send_json(500, {"message": request_message("internal_error", language)})
            return

        self._send_json(200, judgement.to_dict())

    def do_GET(self):
        if self.path == RESULTS_PATH:
            self.send_error(405)
        else:
            self.send_error(404)

    def _read_body(self) -> bytes:
        try:
            length = int(self.headers.get("Content-Length") or 0)
        except ValueError as exc:
            raise MalformedRequestError(f"Bad Content-Length: {exc}") from exc
        if length < 0:
            raise MalformedRequestError(f"Bad Content-Length: {length}")
        return self.rfile.read(length)

    def _send_json(self, status: int, payload: dict) -> None:
        body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


def make_server(judge: HandJudge, host: str = "127.0.0.1", port: int = 8080) -> ThreadingHTTPServer:
    """Build a threading HTTP server bound to (host, port) serving `judge`.

    Port 0 binds an ephemeral port; read it back from server.server_address.
    """
    handler = type("BoundHandsHandler", (HandsHandler,), {"judge": judge})
    return ThreadingHTTPServer((host, port), handler)
