from __future__ import annotations

import logging
from typing import Callable

from fastapi import HTTPException
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

log = logging.getLogger("storefront.body_limit")

JSON_CONTENT_TYPE = "application/json"
TOO_LARGE = "request entity too large"


class JsonBodyLimitMiddleware:
    """
    Caps application/json request bodies at max_bytes().

    A declared Content-Length over the cap is refused before the app runs.
    Otherwise the bytes are counted as they stream in (chunked bodies included)
    and the body read fails with 413 once the running total passes the cap.
    """

    def __init__(self, app: ASGIApp, max_bytes: Callable[[], int]):
        self.app = app
        self.max_bytes = max_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        headers = Headers(scope=scope)
        if JSON_CONTENT_TYPE not in headers.get("content-type", ""):
            await self.app(scope, receive, send)
            return

        limit = self.max_bytes()
        try:
            declared = int(headers.get("content-length") or 0)
        except ValueError:
            declared = 0
        if declared > limit:
            log.warning(
                "body_too_large",
                extra={"extra": {"event": "body_too_large", "path": scope.get("path"), "declared": declared}},
            )
            response = JSONResponse(status_code=413, content={"error": TOO_LARGE})
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > limit:
                    log.warning(
                        "body_too_large",
                        extra={"extra": {"event": "body_too_large", "path": scope.get("path"), "received": received}},
                    )
                    raise HTTPException(status_code=413, detail=TOO_LARGE)
            return message

        await self.app(scope, limited_receive, send)
