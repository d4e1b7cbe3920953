# workdesk/crosscutting/middleware.py
"""
===============================================================================
MODULE: HTTP middlewares (request context + payload limits)
===============================================================================

Goal
----
1) RequestContextMiddleware:
   - Generate/propagate request_id
   - Set contextvars (method/path)
   - One log line per request

2) BodyLimitMiddleware:
   - Protect the API from huge payloads (chunked uploads included)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Components:
  - RequestContextMiddleware
  - BodyLimitMiddleware

Responsibilities:
  - Observability (request_id + logs)
  - Safety (strict body limit)

Collaborators:
  - workdesk/context.py
  - crosscutting/envelope.py
===============================================================================
"""

from __future__ import annotations

import json
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ..context import clear_context, set_request_context
from .envelope import Envelope, payload_too_large
from .logger import logger


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Class:
      RequestContextMiddleware

    Responsibilities:
      - Generate/accept X-Request-Id
      - Set contextvars for log correlation
      - Emit a completion log per request
      - Guarantee clear_context() to avoid leaks

    Collaborators:
      - crosscutting.logger
    ----------------------------------------------------------------------------
    """

    _QUIET_PATHS = {"/healthz"}

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        incoming = (request.headers.get("x-request-id") or "").strip()
        request_id = (
            incoming if self._is_valid_request_id(incoming) else str(uuid.uuid4())
        )

        set_request_context(
            request_id=request_id, method=request.method, path=request.url.path
        )
        request.state.request_id = request_id

        start = time.perf_counter()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers["X-Request-Id"] = request_id
            return response
        except Exception:
            latency = time.perf_counter() - start
            logger.exception(
                "request failed",
                extra={"status_code": 500, "latency_ms": round(latency * 1000, 2)},
            )
            raise
        finally:
            latency = time.perf_counter() - start
            if request.url.path not in self._QUIET_PATHS:
                logger.info(
                    "request completed",
                    extra={
                        "status_code": status_code,
                        "latency_ms": round(latency * 1000, 2),
                    },
                )
            clear_context()

    @staticmethod
    def _is_valid_request_id(value: str) -> bool:
        return bool(value) and len(value) <= 128


class _BodyTooLarge(Exception):
    pass


class BodyLimitMiddleware:
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Class:
      BodyLimitMiddleware

    Responsibilities:
      - Reject requests whose body exceeds max_body_bytes
      - Works with Content-Length and with chunked transfer

    Collaborators:
      - crosscutting.config.get_settings()
      - crosscutting.envelope
      - crosscutting.logger
    ----------------------------------------------------------------------------
    """

    def __init__(self, app, max_bytes: int | None = None):
        from .config import get_settings

        self.app = app
        self._max_bytes = (
            max_bytes if max_bytes is not None else get_settings().max_body_bytes
        )

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = {k.decode().lower(): v.decode() for k, v in scope.get("headers", [])}
        path = scope.get("path", "")

        cl = headers.get("content-length")
        if cl:
            try:
                if int(cl) > self._max_bytes:
                    logger.warning(
                        "payload too large (content-length)",
                        extra={
                            "content_length": cl,
                            "max_bytes": self._max_bytes,
                            "path": path,
                        },
                    )
                    await self._send_too_large(send)
                    return
            except ValueError:
                # Invalid Content-Length: fall back to streaming control.
                pass

        started = False

        async def send_wrapper(message):
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        received = 0

        async def receive_limited():
            nonlocal received
            msg = await receive()
            if msg["type"] == "http.request":
                received += len(msg.get("body", b"") or b"")
                if received > self._max_bytes:
                    raise _BodyTooLarge()
            return msg

        try:
            await self.app(scope, receive_limited, send_wrapper)
        except _BodyTooLarge:
            if started:
                logger.error(
                    "payload exceeded limit after response started",
                    extra={"path": path},
                )
                raise
            logger.warning(
                "payload too large (streaming)",
                extra={
                    "received_bytes": received,
                    "max_bytes": self._max_bytes,
                    "path": path,
                },
            )
            await self._send_too_large(send)

    async def _send_too_large(self, send) -> None:
        exc = payload_too_large(self._max_bytes)
        body = json.dumps(
            Envelope(status_code=exc.status_code, message=exc.message).model_dump(),
            ensure_ascii=False,
        ).encode("utf-8")

        await send(
            {
                "type": "http.response.start",
                "status": 200,
                "headers": [(b"content-type", b"application/json")],
            }
        )
        await send({"type": "http.response.body", "body": body})
