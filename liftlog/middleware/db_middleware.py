# liftlog/middleware/db_middleware.py
"""
Lazy Database Connection Middleware.

Ensures the MongoDB connection is established before processing requests.
"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import logging

from database import Database
from settings import settings

logger = logging.getLogger(__name__)

SKIP_PATHS = {"/", "/health", "/health/detailed", "/docs", "/openapi.json"}


class LazyDatabaseMiddleware(BaseHTTPMiddleware):
    """Middleware to ensure database connection before handling requests."""

    async def dispatch(self, request: Request, call_next):
        """
        Connect to MongoDB on the first request if startup could not.

        A failed attempt is logged and the request proceeds; the store layer
        turns the resulting driver errors into a generic server error.
        """
        if request.url.path in SKIP_PATHS or not settings.DATABASE_LAZY_CONNECT:
            return await call_next(request)

        if not Database._initialized:
            try:
                logger.info("Lazy initializing MongoDB connection...")
                await Database.connect_db(
                    database_url=settings.DATABASE_URL,
                    database_name=settings.DATABASE_NAME
                )
            except Exception as e:
                logger.error(f"Failed to initialize database: {e}")

        return await call_next(request)
