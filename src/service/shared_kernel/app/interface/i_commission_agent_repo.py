"""
Commission Agent Repository Interface

Persists agents under ``commissionAgents/{id}``.
"""

from abc import ABC, abstractmethod
from typing import List

from src.service.shared_kernel.domain.entity.commission_agent_entity import CommissionAgent


class ICommissionAgentRepo(ABC):
    @abstractmethod
    async def get_all(self) -> List[CommissionAgent]:
        pass

    @abstractmethod
    async def save(self, *, agent: CommissionAgent) -> CommissionAgent:
        pass

    @abstractmethod
    async def delete(self, *, agent_id: str) -> None:
        pass
