from datetime import date
from typing import List, Optional

from pydantic import BaseModel


class DailyProfitResponse(BaseModel):
    date: date
    seats_booked: int
    gross_profit: float
    commission_paid: float
    net_profit: float


class MonthlyProfitResponse(BaseModel):
    month: str  # YYYY-MM
    year: int
    month_number: int
    seats_booked: int
    gross_profit: float
    commission_paid: float
    net_profit: float


class AgentPayoutResponse(BaseModel):
    agent_id: str
    name: str
    percentage: float
    applicable_date: Optional[date] = None
    total_payout: float


class ProfitReportResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'total_seats_booked': 8,
                'total_gross_profit': 200.0,
                'total_commission_paid': 30.0,
                'total_net_profit': 170.0,
                'daily': [
                    {
                        'date': '2025-06-01',
                        'seats_booked': 8,
                        'gross_profit': 200.0,
                        'commission_paid': 30.0,
                        'net_profit': 170.0,
                    }
                ],
                'monthly': [],
                'agent_payouts': [],
            }
        },
    }

    total_seats_booked: int
    total_gross_profit: float
    total_commission_paid: float
    total_net_profit: float
    daily: List[DailyProfitResponse]
    monthly: List[MonthlyProfitResponse]
    agent_payouts: List[AgentPayoutResponse]
