from src.platform.logging.loguru_io import Logger
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.shared_kernel.app.interface.i_store_change_publisher import (
    IStoreChangePublisher,
)
from src.service.shared_kernel.app.interface.i_store_snapshot_query_handler import (
    IStoreSnapshotQueryHandler,
)
from src.service.shared_kernel.driven_adapter.state.key_str_generator import (
    make_updates_channel,
)
from src.service.shared_kernel.driven_adapter.state.store_operation import store_operation
from src.service.shared_kernel.driven_adapter.state.store_record_codec import dumps


class StoreChangePublisherImpl(IStoreChangePublisher):
    """
    Publishes ``{"path": ...}`` on the store updates channel after each write.

    The writing process refreshes its own mirror before returning, so its next
    read already sees the write. Other processes refresh from the notification.
    """

    def __init__(self, *, snapshot_handler: IStoreSnapshotQueryHandler) -> None:
        self.snapshot_handler = snapshot_handler
        self._channel = make_updates_channel()

    @Logger.io
    async def publish_change(self, *, path: str) -> None:
        with store_operation('store.publish_change'):
            await kvrocks_client.get_client().publish(self._channel, dumps({'path': path}))
        await self.snapshot_handler.refresh()
