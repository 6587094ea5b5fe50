from datetime import date
from typing import Any, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
import uuid_utils

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.app.interface.i_commission_agent_repo import (
    ICommissionAgentRepo,
)
from src.service.shared_kernel.app.interface.i_store_change_publisher import (
    IStoreChangePublisher,
)
from src.service.shared_kernel.domain.entity.commission_agent_entity import CommissionAgent
from src.service.shared_kernel.domain.value_object.calendar_day import to_day
from src.service.shared_kernel.domain.value_object.store_path import (
    COMMISSION_AGENTS,
    make_store_path,
)


class CreateCommissionAgentUseCase:
    def __init__(
        self,
        *,
        commission_agent_repo: ICommissionAgentRepo,
        change_publisher: IStoreChangePublisher,
    ) -> None:
        self.commission_agent_repo = commission_agent_repo
        self.change_publisher = change_publisher

    @classmethod
    @inject
    def depends(
        cls,
        commission_agent_repo: ICommissionAgentRepo = Depends(
            Provide[Container.commission_agent_repo]
        ),
        change_publisher: IStoreChangePublisher = Depends(
            Provide[Container.store_change_publisher]
        ),
    ) -> Self:
        return cls(commission_agent_repo=commission_agent_repo, change_publisher=change_publisher)

    @Logger.io
    async def create_agent(
        self, *, name: str, percentage: Any, applicable_date: Optional[date] = None
    ) -> CommissionAgent:
        """
        Raises:
            MissingNameError: Blank agent name
            InvalidPercentageError: Percentage not a finite number in [0, 100]
        """
        agent = CommissionAgent.create(
            id=str(uuid_utils.uuid7()),
            name=name,
            percentage=percentage,
            applicable_date=to_day(applicable_date) if applicable_date else None,
        )

        await self.commission_agent_repo.save(agent=agent)
        await self.change_publisher.publish_change(
            path=make_store_path(collection=COMMISSION_AGENTS, record_key=agent.id)
        )

        Logger.base.info(
            f'🤝 [AGENT] Created {agent.name!r} at {agent.percentage}% '
            f'({"global" if agent.is_global else agent.applicable_date})'
        )
        return agent
