"""
Postboard Backend — Credential Endpoint Rate Limiting
=======================================================

What:  Per-IP sliding window limit on POST requests to /api/v1/users/*.
Why:   Login and registration are the endpoints worth hammering (password
       guessing, account enumeration). Post creation and health checks are
       left alone.
How:   Keeps, per client IP, the timestamps of its recent credential
       requests. Timestamps older than the window are dropped on every
       request; if the remaining count has reached the limit the request is
       answered with 429 and a Retry-After header. IPs with no recent hits
       are swept out every CLEANUP_EVERY protected requests.

Scope:
    State is in-process memory: correct for a single uvicorn worker. With
    several workers each one counts separately.
"""

import logging
import time
from collections import defaultdict, deque
from typing import Deque, Dict, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from postboard.config import settings
from postboard.exceptions import RateLimitExceededError
from postboard.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

PROTECTED_PREFIX = "/api/v1/users/"
CLEANUP_EVERY = 1000


class LoginRateLimitMiddleware(BaseHTTPMiddleware):
    """
    Sliding window limiter for the credential endpoints.

    Args:
        max_requests: Requests allowed per IP inside one window
        window_seconds: Window length
    """

    def __init__(
        self,
        app,
        max_requests: Optional[int] = None,
        window_seconds: Optional[int] = None,
    ):
        super().__init__(app)
        self.max_requests = max_requests or settings.login_rate_limit_requests
        self.window_seconds = window_seconds or settings.login_rate_limit_window
        self._hits: Dict[str, Deque[float]] = defaultdict(deque)
        self._requests_since_cleanup = 0

    def _is_protected(self, request: Request) -> bool:
        return request.method == "POST" and request.url.path.startswith(PROTECTED_PREFIX)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not self._is_protected(request):
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        now = time.monotonic()
        hits = self._hits[client_ip]

        while hits and hits[0] <= now - self.window_seconds:
            hits.popleft()

        if len(hits) >= self.max_requests:
            retry_after = int(hits[0] + self.window_seconds - now) + 1
            logger.warning(
                "Rate limit exceeded for IP %s on %s: %d requests in %ds window",
                client_ip,
                request.url.path,
                len(hits),
                self.window_seconds,
            )
            exc = RateLimitExceededError(retry_after=retry_after)
            return JSONResponse(
                status_code=429,
                content={
                    "error": "rate_limit_exceeded",
                    "message": exc.message,
                    "details": exc.context,
                    "request_id": request_id_var.get(""),
                },
                headers={"Retry-After": str(retry_after)},
            )

        hits.append(now)

        # Sweep idle IPs every CLEANUP_EVERY protected requests (amortized O(1))
        self._requests_since_cleanup += 1
        if self._requests_since_cleanup >= CLEANUP_EVERY:
            self._requests_since_cleanup = 0
            self._forget_idle_clients(now)

        return await call_next(request)

    def _forget_idle_clients(self, now: float) -> None:
        """Drops IPs whose newest hit has left the window."""
        cutoff = now - self.window_seconds
        idle = [ip for ip, hits in self._hits.items() if not hits or hits[-1] <= cutoff]
        for ip in idle:
            del self._hits[ip]
