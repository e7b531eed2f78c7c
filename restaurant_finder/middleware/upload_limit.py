"""
Restaurant Finder - Upload Size Limit Middleware
=================================================

What:  Rejects oversized POST /upload requests before the body is read.
How:   Compares the declared Content-Length against the image cap plus a
       margin for multipart framing. Requests without a Content-Length
       (chunked) pass through; the route still enforces the cap on the
       bytes it reads.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from restaurant_finder.config import settings
from restaurant_finder.exceptions import UploadError
from restaurant_finder.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

# Boundaries, part headers and small text fields
MULTIPART_OVERHEAD = 64 * 1024


class UploadSizeLimitMiddleware(BaseHTTPMiddleware):
    """Answers 400 "Upload error: File too large" on an oversized body."""

    LIMITED_PATHS = {"/upload"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method != "POST" or request.url.path not in self.LIMITED_PATHS:
            return await call_next(request)

        declared = request.headers.get("content-length")
        limit = settings.max_upload_size + MULTIPART_OVERHEAD
        if declared is not None and declared.isdigit() and int(declared) > limit:
            rid = request_id_var.get("")
            logger.warning(
                "[%s] Upload rejected before reading: Content-Length %s > %d",
                rid,
                declared,
                limit,
            )
            error = UploadError("File too large", field="image")
            return JSONResponse(
                status_code=400,
                content={
                    "status": "Error",
                    "error": error.message,
                    "details": error.context,
                    "request_id": rid,
                },
            )

        return await call_next(request)
