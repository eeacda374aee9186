# backend/middleware/payload_size_limit.py

import logging

from fastapi import HTTPException
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from utils.settings import DEFAULT_MAX_UPLOAD_BYTES

logger = logging.getLogger(__name__)

TOO_LARGE_MESSAGE = "The file is too large"
BODY_METHODS = ("POST", "PUT", "PATCH")


class PayloadTooLargeError(HTTPException):
    """
    Raised from `receive` once the body passes the limit. It is an
    HTTPException so FastAPI re-raises it out of form parsing and the app's
    handler renders the 413.
    """

    def __init__(self) -> None:
        super().__init__(status_code=413, detail=TOO_LARGE_MESSAGE)


class PayloadSizeLimitMiddleware:
    """
    Caps request bodies at `max_size` bytes.

    A Content-Length over the limit is rejected before the body is read.
    Bodies without one (chunked uploads) are counted as they stream in and
    cut off with a 413 as soon as they pass the limit.
    """

    def __init__(self, app: ASGIApp, max_size: int = DEFAULT_MAX_UPLOAD_BYTES):
        self.app = app
        self.max_size = max_size

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] not in BODY_METHODS:
            await self.app(scope, receive, send)
            return

        path = scope.get("path", "")
        content_length = Headers(scope=scope).get("content-length")
        if content_length:
            try:
                size = int(content_length)
            except ValueError:
                logger.warning("invalid content-length %r path=%s", content_length, path)
                response = JSONResponse(status_code=400, content={"message": "Invalid Content-Length header"})
                await response(scope, receive, send)
                return

            if size > self.max_size:
                logger.warning("payload too large size=%d max=%d path=%s", size, self.max_size, path)
                response = JSONResponse(status_code=413, content={"message": TOO_LARGE_MESSAGE})
                await response(scope, receive, send)
                return

        received = 0
        response_started = False

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_size:
                    logger.warning("payload too large streamed=%d max=%d path=%s", received, self.max_size, path)
                    raise PayloadTooLargeError()
            return message

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, limited_receive, tracking_send)
        except PayloadTooLargeError:
            # read outside the router, nothing rendered it yet
            if response_started:
                raise
            response = JSONResponse(status_code=413, content={"message": TOO_LARGE_MESSAGE})
            await response(scope, receive, send)
