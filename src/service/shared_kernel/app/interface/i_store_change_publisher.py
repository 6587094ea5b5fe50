from abc import ABC, abstractmethod


class IStoreChangePublisher(ABC):
    """
    Announces that a store path changed.

    Subscribers react by reloading their snapshot; the notification carries no data.
    The publishing process has refreshed its own snapshot when this returns.
    """

    @abstractmethod
    async def publish_change(self, *, path: str) -> None:
        """
        Args:
            path: Changed store path, e.g. ``bookings/<id>`` or ``dailyPrices/2025-06-01``
        """
        pass
