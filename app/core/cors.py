"""跨域白名单"""

import logging
from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)


class OriginAllowListMiddleware(BaseHTTPMiddleware):
    """拒绝白名单以外的来源；没有 Origin 头的请求（服务端调用）直接放行"""

    def __init__(self, app, allowed_origins: Iterable[str]):
        super().__init__(app)
        self.allowed_origins = frozenset(allowed_origins)

    def is_allowed(self, origin) -> bool:
        return origin is None or origin in self.allowed_origins

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        if not self.is_allowed(origin):
            logger.warning(f"Blocked request from origin {origin}: {request.method} {request.url.path}")
            return JSONResponse(
                status_code=403,
                content={"success": False, "message": "Not allowed by CORS"},
            )
        return await call_next(request)
