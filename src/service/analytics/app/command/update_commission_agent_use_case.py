from datetime import date
from typing import Any, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.app.interface.i_commission_agent_repo import (
    ICommissionAgentRepo,
)
from src.service.shared_kernel.app.interface.i_store_change_publisher import (
    IStoreChangePublisher,
)
from src.service.shared_kernel.app.interface.i_store_snapshot_query_handler import (
    IStoreSnapshotQueryHandler,
)
from src.service.shared_kernel.domain.entity.commission_agent_entity import CommissionAgent
from src.service.shared_kernel.domain.value_object.calendar_day import to_day
from src.service.shared_kernel.domain.value_object.store_path import (
    COMMISSION_AGENTS,
    make_store_path,
)


class UpdateCommissionAgentUseCase:
    def __init__(
        self,
        *,
        snapshot_handler: IStoreSnapshotQueryHandler,
        commission_agent_repo: ICommissionAgentRepo,
        change_publisher: IStoreChangePublisher,
    ) -> None:
        self.snapshot_handler = snapshot_handler
        self.commission_agent_repo = commission_agent_repo
        self.change_publisher = change_publisher

    @classmethod
    @inject
    def depends(
        cls,
        snapshot_handler: IStoreSnapshotQueryHandler = Depends(
            Provide[Container.store_snapshot_query_handler]
        ),
        commission_agent_repo: ICommissionAgentRepo = Depends(
            Provide[Container.commission_agent_repo]
        ),
        change_publisher: IStoreChangePublisher = Depends(
            Provide[Container.store_change_publisher]
        ),
    ) -> Self:
        return cls(
            snapshot_handler=snapshot_handler,
            commission_agent_repo=commission_agent_repo,
            change_publisher=change_publisher,
        )

    @Logger.io
    async def update_agent(
        self,
        *,
        agent_id: str,
        name: str,
        percentage: Any,
        applicable_date: Optional[date] = None,
    ) -> CommissionAgent:
        """Replace name, percentage and applicable date; no date makes the agent global"""
        snapshot = await self.snapshot_handler.get_snapshot()
        agent = snapshot.find_agent(agent_id)
        if agent is None:
            raise NotFoundError('Commission agent not found')

        updated = agent.update(
            name=name,
            percentage=percentage,
            applicable_date=to_day(applicable_date) if applicable_date else None,
        )

        await self.commission_agent_repo.save(agent=updated)
        await self.change_publisher.publish_change(
            path=make_store_path(collection=COMMISSION_AGENTS, record_key=agent_id)
        )

        Logger.base.info(f'🤝 [AGENT] Updated {agent_id}: {updated.name!r} {updated.percentage}%')
        return updated
