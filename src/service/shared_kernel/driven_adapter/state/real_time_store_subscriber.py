import contextlib

import anyio
from anyio.abc import TaskGroup
import orjson
from redis.asyncio import Redis as AsyncRedis

from src.platform.logging.loguru_io import Logger
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.shared_kernel.app.interface.i_store_snapshot_query_handler import (
    IStoreSnapshotQueryHandler,
)
from src.service.shared_kernel.driven_adapter.state.key_str_generator import (
    make_updates_channel,
)


class RealTimeStoreSubscriber:
    """Subscribe to store push notifications and refresh the mirror on each one"""

    def __init__(
        self,
        *,
        snapshot_handler: IStoreSnapshotQueryHandler,
        reconnect_delay: float = 5.0,  # Delay before reconnecting after error
    ) -> None:
        self.snapshot_handler = snapshot_handler
        self.channel = make_updates_channel()
        self._reconnect_delay = reconnect_delay
        self._pubsub_client: AsyncRedis | None = None

    async def start(self, *, task_group: TaskGroup) -> None:
        """Start Redis Pub/Sub subscription"""
        task_group.start_soon(self._subscribe_loop)  # pyrefly: ignore[bad-argument-type]
        Logger.base.info(f'🔔 [Store Subscriber] Started on {self.channel}')

    async def _subscribe_loop(self) -> None:
        """Main subscription loop with automatic reconnection"""
        while True:
            try:
                if self._pubsub_client is None:
                    self._pubsub_client = await kvrocks_client.create_pubsub_client()

                pubsub = self._pubsub_client.pubsub()

                try:
                    await pubsub.subscribe(self.channel)
                    Logger.base.info(f'📡 [Store Subscriber] Subscribed to {self.channel}')

                    # Changes made while disconnected were never pushed
                    await self.snapshot_handler.refresh()

                    async for message in pubsub.listen():
                        if message['type'] == 'message':
                            await self._handle_update(message['data'])
                finally:
                    await pubsub.unsubscribe(self.channel)
                    await pubsub.aclose()

            except Exception as e:
                Logger.base.error(f'❌ [Store Subscriber] Error: {e}')

                if self._pubsub_client:
                    with contextlib.suppress(Exception):
                        await self._pubsub_client.aclose()
                    self._pubsub_client = None

                Logger.base.info(
                    f'🔄 [Store Subscriber] Reconnecting in {self._reconnect_delay}s...'
                )
                await anyio.sleep(self._reconnect_delay)

    @Logger.io
    async def _handle_update(self, data: str | bytes) -> str | None:
        """Refresh the whole mirror; the payload only names which path changed"""
        try:
            path = orjson.loads(data).get('path')
        except orjson.JSONDecodeError as e:
            Logger.base.warning(f'⚠️ [Store Subscriber] Parse error: {e}')
            path = None
        await self.snapshot_handler.refresh()
        return path
