"""
Marketplace FastAPI Application

Run with: uvicorn src.service.marketplace.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.platform.state.kvrocks_client import kvrocks_client


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Marketplace] Starting up...')

    setup()
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Marketplace] Dependency injection wired')

    if settings.LEDGER_STORE_BACKEND == 'kvrocks':
        # Fail fast when the ledger store is unreachable
        kvrocks_client.initialize()
        Logger.base.info('📡 [Marketplace] Kvrocks ledger store ready')
    else:
        Logger.base.warning('⚠️  [Marketplace] In-memory ledger store, state is not durable')

    yield

    Logger.base.info('🛑 [Marketplace] Shutting down...')
    if settings.LEDGER_STORE_BACKEND == 'kvrocks':
        kvrocks_client.disconnect()
    container.unwire()
    cleanup()
    Logger.base.info('👋 [Marketplace] Shutdown complete')


app = create_app(lifespan=lifespan)
