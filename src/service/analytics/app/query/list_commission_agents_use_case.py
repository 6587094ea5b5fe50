from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.app.interface.i_store_snapshot_query_handler import (
    IStoreSnapshotQueryHandler,
)
from src.service.shared_kernel.domain.entity.commission_agent_entity import CommissionAgent


class ListCommissionAgentsUseCase:
    def __init__(self, *, snapshot_handler: IStoreSnapshotQueryHandler) -> None:
        self.snapshot_handler = snapshot_handler

    @classmethod
    @inject
    def depends(
        cls,
        snapshot_handler: IStoreSnapshotQueryHandler = Depends(
            Provide[Container.store_snapshot_query_handler]
        ),
    ) -> Self:
        return cls(snapshot_handler=snapshot_handler)

    @Logger.io
    async def list_agents(self) -> List[CommissionAgent]:
        snapshot = await self.snapshot_handler.get_snapshot()
        return sorted(snapshot.commission_agents, key=lambda agent: agent.name.lower())
