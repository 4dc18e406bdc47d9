# team_service/middleware/request_log.py
import time

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        level = "WARNING" if response.status_code >= 400 else "INFO"
        logger.log(level, "[HTTP] {} {} -> {} ({:.1f} ms)", request.method, path, response.status_code, elapsed_ms)
        response.headers["X-Elapsed-Ms"] = f"{elapsed_ms:.1f}"
        return response
