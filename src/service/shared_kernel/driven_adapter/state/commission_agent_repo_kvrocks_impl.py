from typing import List

from src.platform.logging.loguru_io import Logger
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.shared_kernel.app.interface.i_commission_agent_repo import (
    ICommissionAgentRepo,
)
from src.service.shared_kernel.domain.entity.commission_agent_entity import CommissionAgent
from src.service.shared_kernel.domain.value_object.store_path import COMMISSION_AGENTS
from src.service.shared_kernel.driven_adapter.state.key_str_generator import make_collection_key
from src.service.shared_kernel.driven_adapter.state.store_operation import store_operation
from src.service.shared_kernel.driven_adapter.state.store_record_codec import (
    decode_commission_agent,
    dumps,
    encode_commission_agent,
    loads,
)


class CommissionAgentRepoKvrocksImpl(ICommissionAgentRepo):
    def __init__(self) -> None:
        self._key = make_collection_key(collection=COMMISSION_AGENTS)

    @Logger.io
    async def get_all(self) -> List[CommissionAgent]:
        with store_operation('commission_agents.get_all'):
            records = await kvrocks_client.get_client().hgetall(self._key)  # type: ignore[misc]
        return [decode_commission_agent(loads(raw)) for raw in records.values()]

    @Logger.io
    async def save(self, *, agent: CommissionAgent) -> CommissionAgent:
        with store_operation('commission_agents.save'):
            await kvrocks_client.get_client().hset(  # type: ignore[misc]
                self._key, agent.id, dumps(encode_commission_agent(agent))
            )
        return agent

    @Logger.io
    async def delete(self, *, agent_id: str) -> None:
        with store_operation('commission_agents.delete'):
            await kvrocks_client.get_client().hdel(self._key, agent_id)  # type: ignore[misc]
