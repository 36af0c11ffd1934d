"""Application lifespan: startup and shutdown.

Single place for startup logic. Configures logging and loads the entity
store up front so seed problems surface at boot instead of on the first
request.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from portal.api.v1.dependencies import get_entity_store
from portal.core.config import get_settings
from portal.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and warm the entity store, then serve."""
    setup_logging()
    settings = get_settings()

    store = get_entity_store()
    logger.info(
        "%s %s ready: users=%d content=%d",
        settings.app_name,
        settings.app_version,
        len(store.list_users()),
        len(store.list_content()),
    )

    yield

    logger.info("%s shutting down", settings.app_name)
