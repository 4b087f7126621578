"""
Mutant Finder Security Module

Provides:
- Rate limiting per IP
- DNA payload size limits
- Security headers
"""

import time
from collections import deque
from typing import Deque, Dict, Optional, Sequence
import logging

from .config import FinderConfig

logger = logging.getLogger(__name__)


# =============================================================================
# RATE LIMITING
# =============================================================================

MINUTE = 60
HOUR = 3600


class RateLimiter:
    """
    Sliding-window request limits per client IP.

    Each IP keeps the timestamps of its requests from the last hour; the
    minute limit counts the newest of them. IPs with nothing left in their
    window and expired blocks are swept out every ``sweep_interval`` seconds.
    """

    def __init__(
        self,
        requests_per_minute: int = FinderConfig.REQUESTS_PER_MINUTE,
        requests_per_hour: int = FinderConfig.REQUESTS_PER_HOUR,
        block_duration: int = 300,
        sweep_interval: int = MINUTE
    ):
        self.requests_per_minute = requests_per_minute
        self.requests_per_hour = requests_per_hour
        self.block_duration = block_duration
        self.sweep_interval = sweep_interval
        self._requests: Dict[str, Deque[float]] = {}
        self._blocked_until: Dict[str, float] = {}
        self._last_sweep = float("-inf")

    def _sweep(self, now: float) -> None:
        hour_ago = now - HOUR
        idle = [ip for ip, stamps in self._requests.items() if not stamps or stamps[-1] <= hour_ago]
        for ip in idle:
            del self._requests[ip]
        expired = [ip for ip, until in self._blocked_until.items() if until <= now]
        for ip in expired:
            del self._blocked_until[ip]
        self._last_sweep = now
        if idle or expired:
            logger.debug(f"Rate limiter dropped {len(idle)} idle IPs, {len(expired)} expired blocks")

    def _block(self, ip: str, now: float, window: str, limit: int) -> tuple[bool, str]:
        self._blocked_until[ip] = now + self.block_duration
        logger.warning(f"Rate limit exceeded ({window}): {ip}")
        return False, f"Rate limit exceeded ({limit} requests/{window})"

    def is_allowed(self, ip: str, now: Optional[float] = None) -> tuple[bool, str]:
        """Record a request from ``ip`` unless it is over a limit or blocked."""
        if now is None:
            now = time.time()
        if now - self._last_sweep >= self.sweep_interval:
            self._sweep(now)

        until = self._blocked_until.get(ip)
        if until is not None:
            if now < until:
                return False, f"Blocked for {int(until - now)}s due to rate limit violation"
            del self._blocked_until[ip]

        stamps = self._requests.setdefault(ip, deque())
        while stamps and stamps[0] <= now - HOUR:
            stamps.popleft()

        minute_ago = now - MINUTE
        last_minute = 0
        for stamp in reversed(stamps):
            if stamp <= minute_ago:
                break
            last_minute += 1

        if last_minute >= self.requests_per_minute:
            return self._block(ip, now, "minute", self.requests_per_minute)
        if len(stamps) >= self.requests_per_hour:
            return self._block(ip, now, "hour", self.requests_per_hour)

        stamps.append(now)
        return True, "OK"

    def get_stats(self) -> Dict:
        """Get rate limiter statistics."""
        return {
            "tracked_ips": len(self._requests),
            "blocked_ips": len(self._blocked_until),
            "requests_per_minute_limit": self.requests_per_minute,
            "requests_per_hour_limit": self.requests_per_hour
        }


# =============================================================================
# INPUT LIMITS
# =============================================================================

class InputValidator:
    """Reject payloads too large to classify. Content is checked by the grid validator."""

    MAX_GRID_SIDE = FinderConfig.MAX_GRID_SIDE

    @classmethod
    def validate_dna(cls, dna: Optional[Sequence], max_side: Optional[int] = None) -> tuple[bool, str]:
        """
        Returns: (is_valid, error_message)
        """
        limit = max_side if max_side is not None else cls.MAX_GRID_SIDE
        if dna is None:
            return True, ""

        if len(dna) > limit:
            return False, f"DNA table too large (max {limit} rows)"

        for row in dna:
            if isinstance(row, str) and len(row) > limit:
                return False, f"DNA row too long (max {limit} bases)"

        return True, ""


# =============================================================================
# SECURITY HEADERS
# =============================================================================

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
}


def get_security_headers() -> Dict[str, str]:
    """Get security headers for responses."""
    return SECURITY_HEADERS.copy()


# =============================================================================
# MIDDLEWARE
# =============================================================================

def create_security_middleware(app, limiter: RateLimiter):
    """
    Attach rate limiting and security headers to a FastAPI app.

    Usage:
        app = FastAPI()
        create_security_middleware(app, RateLimiter())
    """
    from fastapi import Request
    from fastapi.responses import JSONResponse

    @app.middleware("http")
    async def security_middleware(request: Request, call_next):
        ip = request.client.host if request.client else "unknown"

        allowed, message = limiter.is_allowed(ip)
        if not allowed:
            return JSONResponse(
                status_code=429,
                content={"detail": message},
                headers={"Retry-After": str(limiter.block_duration)}
            )

        response = await call_next(request)

        for header, value in SECURITY_HEADERS.items():
            response.headers[header] = value

        return response

    return app
