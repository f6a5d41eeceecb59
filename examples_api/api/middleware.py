"""Request logging for write operations."""

import logging

from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

MAX_PAYLOAD_LENGTH = 500
MASKED_PAYLOAD = "*****"


class RequestLoggingMiddleware:
    """Log method, path, status and payload of every non-GET/OPTIONS request.

    Payloads are cut at ``MAX_PAYLOAD_LENGTH`` characters and masked whole when
    they mention a password.
    """

    methods_to_exclude = frozenset({"GET", "OPTIONS"})

    def __init__(self, app: ASGIApp, paths_to_exclude: frozenset[str] = frozenset()):
        self.app = app
        self.paths_to_exclude = paths_to_exclude

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] in self.methods_to_exclude:
            await self.app(scope, receive, send)
            return

        body = bytearray()
        status_code = 500

        async def receive_wrapper() -> Message:
            message = await receive()
            if message["type"] == "http.request" and len(body) < MAX_PAYLOAD_LENGTH:
                body.extend(message.get("body", b""))
            return message

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive_wrapper, send_wrapper)
        finally:
            logger.info(
                "%s %s -> %s payload=%s",
                scope["method"],
                scope["path"],
                status_code,
                self._payload(scope["path"], bytes(body)),
            )

    def _payload(self, path: str, body: bytes) -> str:
        payload = body[:MAX_PAYLOAD_LENGTH].decode("utf-8", errors="replace")
        if path in self.paths_to_exclude or "password" in payload:
            return MASKED_PAYLOAD
        return payload
