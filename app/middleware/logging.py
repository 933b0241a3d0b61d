"""
Request logging middleware
Logs method, path, status and timing for every HTTP request.
"""
import logging
import time
import json
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

_REDACTED_HEADERS = {"authorization", "cookie"}


class RequestLoggingMiddleware:
    """
    Pure ASGI middleware to log API requests

    Bodies are never read here so multipart uploads stream untouched.
    Headers are logged only when verbose is set, with credentials redacted.
    """

    def __init__(self, app: ASGIApp, verbose: bool = False) -> None:
        self.app = app
        self.verbose = verbose

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start_time = time.time()
        method = scope["method"]
        path = scope["path"]

        status_code = None

        async def send_with_logging(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        if self.verbose:
            headers = {}
            for key, value in scope.get("headers", []):
                name = key.decode("latin-1")
                headers[name] = "***" if name.lower() in _REDACTED_HEADERS else value.decode("latin-1")
            logger.debug(f"Request: {method} {path}")
            logger.debug(f"Headers: {json.dumps(headers, ensure_ascii=False, indent=2)}")

        try:
            await self.app(scope, receive, send_with_logging)
        finally:
            process_time = time.time() - start_time
            logger.info(
                f"{method} {path} - "
                f"Status: {status_code or 'unknown'} - "
                f"Time: {process_time:.3f}s"
            )
