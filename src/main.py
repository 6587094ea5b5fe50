"""
Production FastAPI Application

Booking and profits API with the Kvrocks-backed store mirror.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import anyio
from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.exception.exceptions import StoreUnavailableError
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig
from src.platform.state.kvrocks_client import kvrocks_client


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info(f'🚀 [Kcrown Tickets] Starting up (store backend: {settings.STORE_BACKEND})...')

    tracing = TracingConfig(service_name='kcrown-tickets')
    tracing.setup()
    Logger.base.info('📊 [Kcrown Tickets] OpenTelemetry tracing configured')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Kcrown Tickets] Dependency injection wired')

    use_kvrocks = settings.STORE_BACKEND == 'kvrocks'
    if use_kvrocks:
        tracing.instrument_redis()
        # Initialize Kvrocks connection pool (fail-fast)
        await kvrocks_client.initialize()
        Logger.base.info('📡 [Kcrown Tickets] Kvrocks initialized')

    # Baseline snapshot; until one loads, reads answer 503 with reload_required
    snapshot_handler = container.store_snapshot_query_handler()
    try:
        await snapshot_handler.refresh()
    except StoreUnavailableError as e:
        Logger.base.error(f'❌ [Kcrown Tickets] Initial store load failed: {e.message}')

    async with anyio.create_task_group() as tg:
        if use_kvrocks:
            subscriber = container.real_time_store_subscriber()
            await subscriber.start(task_group=tg)

        Logger.base.info('✅ [Kcrown Tickets] Ready to serve requests')

        yield

        Logger.base.info('🛑 [Kcrown Tickets] Shutting down...')
        tg.cancel_scope.cancel()

    if use_kvrocks:
        await kvrocks_client.disconnect()
        Logger.base.info('📡 [Kcrown Tickets] Kvrocks disconnected')

    # Shutdown tracing (flush remaining spans)
    tracing.shutdown()

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Kcrown Tickets] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)
