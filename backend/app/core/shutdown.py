"""
Startup/shutdown lifecycle for the payroll server.
Lets in-flight requests finish and releases the database pool on shutdown.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Awaitable, Callable, Optional

from app.core.config import settings

logger = logging.getLogger("payroll.shutdown")


class GracefulShutdownManager:
    """Tracks in-flight requests and runs cleanup callbacks once they drain."""

    def __init__(self, timeout: int = 30):
        self._shutdown_requested = False
        self._timeout = timeout
        self._shutdown_callbacks: list[Callable[[], Awaitable[None]]] = []
        self._request_count = 0
        self._lock = asyncio.Lock()

    @property
    def shutdown_requested(self) -> bool:
        return self._shutdown_requested

    @property
    def pending_requests(self) -> int:
        return self._request_count

    async def increment_requests(self) -> None:
        async with self._lock:
            self._request_count += 1

    async def decrement_requests(self) -> None:
        async with self._lock:
            self._request_count -= 1

    def add_shutdown_callback(self, callback: Callable[[], Awaitable[None]]) -> None:
        self._shutdown_callbacks.append(callback)

    async def shutdown(self) -> None:
        if self._shutdown_requested:
            return

        self._shutdown_requested = True
        logger.info("Graceful shutdown initiated...")

        loop = asyncio.get_running_loop()
        start_time = loop.time()
        while self._request_count > 0:
            if loop.time() - start_time > self._timeout:
                logger.warning(
                    f"Shutdown timeout reached with {self._request_count} pending requests"
                )
                break
            await asyncio.sleep(0.5)

        for callback in self._shutdown_callbacks:
            try:
                await callback()
            except Exception as e:
                logger.error(f"Error in shutdown callback: {e}")

        logger.info("Graceful shutdown complete")


_shutdown_manager: Optional[GracefulShutdownManager] = None


def get_shutdown_manager() -> GracefulShutdownManager:
    """Get the process-wide shutdown manager."""
    global _shutdown_manager
    if _shutdown_manager is None:
        _shutdown_manager = GracefulShutdownManager(timeout=settings.SHUTDOWN_TIMEOUT)
    return _shutdown_manager


@asynccontextmanager
async def lifespan_manager(app):
    """
    FastAPI lifespan context manager for startup/shutdown.

    Usage:
        app = FastAPI(lifespan=lifespan_manager)
    """
    from app.db.session import engine, init_db

    logger.info("Application starting up...")
    shutdown_manager = get_shutdown_manager()

    if settings.AUTO_CREATE_TABLES:
        await init_db(engine)

    async def cleanup_database():
        logger.info("Closing database connections...")
        await engine.dispose()

    shutdown_manager.add_shutdown_callback(cleanup_database)
    logger.info("Application startup complete")

    try:
        yield
    finally:
        logger.info("Application shutting down...")
        await shutdown_manager.shutdown()


class RequestTrackingMiddleware:
    """
    Counts in-flight requests and rejects new ones with 503 once shutdown starts.
    """

    def __init__(self, app):
        self.app = app
        self.shutdown_manager = get_shutdown_manager()

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        if self.shutdown_manager.shutdown_requested:
            await send({
                "type": "http.response.start",
                "status": 503,
                "headers": [
                    [b"content-type", b"application/json"],
                    [b"connection", b"close"],
                    [b"retry-after", b"5"],
                ],
            })
            await send({
                "type": "http.response.body",
                "body": b'{"error": "Service is shutting down", "retry_after": 5}',
            })
            return

        await self.shutdown_manager.increment_requests()
        try:
            await self.app(scope, receive, send)
        finally:
            await self.shutdown_manager.decrement_requests()
