from datetime import date
from typing import Optional

from pydantic import BaseModel, StrictFloat, StrictInt

from src.service.shared_kernel.domain.entity.commission_agent_entity import CommissionAgent


class CommissionAgentRequest(BaseModel):
    name: str = ''
    percentage: StrictInt | StrictFloat
    applicable_date: Optional[date] = None  # None: applies to every day

    model_config = {
        'json_schema_extra': {
            'examples': [
                {'name': 'John Doe', 'percentage': 5},
                {'name': 'Mike Ross', 'percentage': 10, 'applicable_date': '2025-06-01'},
            ]
        }
    }


class CommissionAgentResponse(BaseModel):
    id: str
    name: str
    percentage: float
    applicable_date: Optional[date] = None
    is_global: bool

    @classmethod
    def from_entity(cls, agent: CommissionAgent) -> 'CommissionAgentResponse':
        return cls(
            id=agent.id,
            name=agent.name,
            percentage=agent.percentage,
            applicable_date=agent.applicable_date,
            is_global=agent.is_global,
        )
