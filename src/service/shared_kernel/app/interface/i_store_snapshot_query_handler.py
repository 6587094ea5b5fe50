"""
Store Snapshot Query Handler Interface

The in-memory mirror of the external store. Readers get the latest complete
snapshot; only store push notifications replace it.
"""

from abc import ABC, abstractmethod

from src.service.shared_kernel.domain.value_object.store_snapshot import StoreSnapshot


class IStoreSnapshotQueryHandler(ABC):
    @abstractmethod
    async def get_snapshot(self) -> StoreSnapshot:
        """
        Return the last loaded snapshot, loading one first if none exists yet.

        Raises:
            StoreUnavailableError: If no snapshot exists and the store cannot be read
        """
        pass

    @abstractmethod
    async def refresh(self) -> StoreSnapshot:
        """Reload every collection and replace the current snapshot as a whole."""
        pass
