from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.analytics.app.command.create_commission_agent_use_case import (
    CreateCommissionAgentUseCase,
)
from src.service.analytics.app.command.delete_commission_agent_use_case import (
    DeleteCommissionAgentUseCase,
)
from src.service.analytics.app.command.update_commission_agent_use_case import (
    UpdateCommissionAgentUseCase,
)
from src.service.analytics.app.query.get_profit_report_use_case import GetProfitReportUseCase
from src.service.analytics.app.query.list_commission_agents_use_case import (
    ListCommissionAgentsUseCase,
)
from src.service.analytics.driving_adapter.http_controller.schema.commission_agent_schema import (
    CommissionAgentRequest,
    CommissionAgentResponse,
)
from src.service.analytics.driving_adapter.http_controller.schema.profit_schema import (
    AgentPayoutResponse,
    DailyProfitResponse,
    MonthlyProfitResponse,
    ProfitReportResponse,
)


router = APIRouter()


@router.get('/profit')
@Logger.io
async def get_profit_report(
    use_case: GetProfitReportUseCase = Depends(GetProfitReportUseCase.depends),
) -> ProfitReportResponse:
    report = await use_case.get_report()
    return ProfitReportResponse(
        total_seats_booked=report.total_seats_booked,
        total_gross_profit=report.total_gross_profit,
        total_commission_paid=report.total_commission_paid,
        total_net_profit=report.total_net_profit,
        daily=[
            DailyProfitResponse(
                date=day.date,
                seats_booked=day.seats_booked,
                gross_profit=day.gross_profit,
                commission_paid=day.commission_paid,
                net_profit=day.net_profit,
            )
            for day in report.daily
        ],
        monthly=[
            MonthlyProfitResponse(
                month=month.month_key,
                year=month.year,
                month_number=month.month,
                seats_booked=month.seats_booked,
                gross_profit=month.gross_profit,
                commission_paid=month.commission_paid,
                net_profit=month.net_profit,
            )
            for month in report.monthly
        ],
        agent_payouts=[
            AgentPayoutResponse(
                agent_id=payout.agent_id,
                name=payout.name,
                percentage=payout.percentage,
                applicable_date=payout.applicable_date,
                total_payout=payout.total_payout,
            )
            for payout in report.agent_payouts
        ],
    )


@router.get('/agent')
@Logger.io
async def list_commission_agents(
    use_case: ListCommissionAgentsUseCase = Depends(ListCommissionAgentsUseCase.depends),
) -> List[CommissionAgentResponse]:
    agents = await use_case.list_agents()
    return [CommissionAgentResponse.from_entity(agent) for agent in agents]


@router.post('/agent', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_commission_agent(
    request: CommissionAgentRequest,
    use_case: CreateCommissionAgentUseCase = Depends(CreateCommissionAgentUseCase.depends),
) -> CommissionAgentResponse:
    agent = await use_case.create_agent(
        name=request.name,
        percentage=request.percentage,
        applicable_date=request.applicable_date,
    )
    return CommissionAgentResponse.from_entity(agent)


@router.put('/agent/{agent_id}')
@Logger.io
async def update_commission_agent(
    agent_id: str,
    request: CommissionAgentRequest,
    use_case: UpdateCommissionAgentUseCase = Depends(UpdateCommissionAgentUseCase.depends),
) -> CommissionAgentResponse:
    agent = await use_case.update_agent(
        agent_id=agent_id,
        name=request.name,
        percentage=request.percentage,
        applicable_date=request.applicable_date,
    )
    return CommissionAgentResponse.from_entity(agent)


@router.delete('/agent/{agent_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_commission_agent(
    agent_id: str,
    use_case: DeleteCommissionAgentUseCase = Depends(DeleteCommissionAgentUseCase.depends),
) -> None:
    await use_case.delete_agent(agent_id=agent_id)
