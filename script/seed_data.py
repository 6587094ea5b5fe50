#!/usr/bin/env python3
"""
Store Seed Script
Populate sample commission agents into Kvrocks

Features:
1. Create Commission Agents - 3 global agents (John Doe, Jane Smith, Mike Ross)
2. Publish one change notification per agent so running app instances refresh

Notes:
- Bookings and daily prices are left empty; create them through the booking API
- Uses the same use case as POST /api/analytics/agent
"""

import asyncio
from dataclasses import dataclass

from script.kvrocks_store import build_change_publisher
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.analytics.app.command.create_commission_agent_use_case import (
    CreateCommissionAgentUseCase,
)
from src.service.shared_kernel.driven_adapter.state.commission_agent_repo_kvrocks_impl import (
    CommissionAgentRepoKvrocksImpl,
)


@dataclass
class AgentConfig:
    """Commission agent seed configuration"""
    name: str
    percentage: float


SAMPLE_AGENTS = [
    AgentConfig(name='John Doe', percentage=5),
    AgentConfig(name='Jane Smith', percentage=3.5),
    AgentConfig(name='Mike Ross', percentage=10),
]


async def create_agents() -> None:
    print(f'🤝 Creating {len(SAMPLE_AGENTS)} commission agents...')

    agent_repo = CommissionAgentRepoKvrocksImpl()
    use_case = CreateCommissionAgentUseCase(
        commission_agent_repo=agent_repo,
        change_publisher=build_change_publisher(),
    )

    existing = {agent.name for agent in await agent_repo.get_all()}
    for config in SAMPLE_AGENTS:
        if config.name in existing:
            print(f'   ⏭️  Skipped {config.name}: already present')
            continue
        agent = await use_case.create_agent(name=config.name, percentage=config.percentage)
        print(f'   ✅ Created agent: ID={agent.id}, Name={agent.name}, {agent.percentage}%')


async def verify_data() -> None:
    """Verify seeded data"""
    print('🔍 Verifying seeded data...')

    agents = await CommissionAgentRepoKvrocksImpl().get_all()
    print(f'   Commission agent count: {len(agents)}')
    for agent in sorted(agents, key=lambda a: a.name):
        scope = 'global' if agent.is_global else agent.applicable_date
        print(f'      {agent.name}: {agent.percentage}% ({scope})')

    print('   ✅ Data verification completed!')


async def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    await kvrocks_client.initialize()
    print('📡 Kvrocks connection pool initialized')

    try:
        await create_agents()
        print()
        await verify_data()

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')
    finally:
        await kvrocks_client.disconnect()


if __name__ == '__main__':
    asyncio.run(main())
