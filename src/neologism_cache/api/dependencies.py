"""Dependency injection configuration for the FastAPI app.

Uses FastAPI's app.state pattern for storing the session-scoped objects.

Pattern:
    - One EntityCache per application lifetime, stored in app.state
    - Dependency functions retrieve it from request.app.state
    - Tests inject a prepared handler and skip the Supabase wiring
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from neologism_cache.config import settings
from neologism_cache.handlers import NeologismHandler
from neologism_cache.logging_config import setup_logging
from neologism_cache.repositories import SupabaseEntityService
from neologism_cache.services import (
    CollectingNotificationSink,
    EntityCache,
    LoggingNotificationSink,
)

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> NeologismHandler:
    """Dependency injection for NeologismHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "neologism_handler", None)
    if handler is None:
        raise RuntimeError("NeologismHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for the FastAPI app.

    Unless a handler was injected up front, builds and stores in app.state:
    1. Repository (Supabase) - app.state.entity_service
    2. Entity cache with its auth state, loaded once at startup
    3. Handler (HTTP endpoints) - app.state.neologism_handler

    Cleanup:
        Closes the HTTP client and removes everything from app.state
    """
    if getattr(app.state, "neologism_handler", None) is not None:
        yield
        return

    setup_logging()
    logger.info("Starting Neologism Cache API against %s", settings.supabase_url)

    service = SupabaseEntityService.create()
    notifications = CollectingNotificationSink(forward_to=LoggingNotificationSink())
    cache = EntityCache.create(service=service, notifier=notifications)

    # A restored session triggers the refresh through the auth subscription
    if not await cache.auth.restore():
        await cache.refresh_data()

    app.state.entity_service = service
    app.state.neologism_handler = NeologismHandler(cache=cache, notifications=notifications)

    try:
        yield
    finally:
        await service.close()
        del app.state.neologism_handler
        del app.state.entity_service
        logger.info("Neologism Cache API shut down")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[NeologismHandler, Depends(get_handler)]
