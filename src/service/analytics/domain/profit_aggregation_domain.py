"""
Profit Aggregation Domain

Daily, monthly and per-agent financial summaries, recomputed from the source
records on every call. Nothing here is persisted.

Commission percentages of every qualifying agent add up without a cap, so a
day's net profit goes negative once they exceed 100%.
"""

from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Mapping, Optional

import attrs

from src.service.shared_kernel.domain.entity.booking_entity import Booking
from src.service.shared_kernel.domain.entity.commission_agent_entity import CommissionAgent
from src.service.shared_kernel.domain.pricing_domain import booking_value, price_for_date
from src.service.shared_kernel.domain.value_object.calendar_day import (
    day_key,
    month_key,
    parse_month_key,
    to_day,
)
from src.service.shared_kernel.domain.value_object.store_snapshot import StoreSnapshot


@attrs.define(frozen=True)
class DailyProfit:
    date: date
    seats_booked: int
    gross_profit: float
    commission_paid: float

    @property
    def day_key(self) -> str:
        return day_key(self.date)

    @property
    def net_profit(self) -> float:
        return self.gross_profit - self.commission_paid


@attrs.define(frozen=True)
class MonthlyProfit:
    year: int
    month: int
    seats_booked: int
    gross_profit: float
    commission_paid: float
    net_profit: float

    @property
    def month_key(self) -> str:
        return f'{self.year:04d}-{self.month:02d}'


@attrs.define(frozen=True)
class AgentPayout:
    agent_id: str
    name: str
    percentage: float
    applicable_date: Optional[date]
    total_payout: float


@attrs.define(frozen=True)
class ProfitReport:
    daily: List[DailyProfit]
    monthly: List[MonthlyProfit]
    agent_payouts: List[AgentPayout]

    @property
    def total_seats_booked(self) -> int:
        return sum(day.seats_booked for day in self.daily)

    @property
    def total_gross_profit(self) -> float:
        return sum(day.gross_profit for day in self.daily)

    @property
    def total_commission_paid(self) -> float:
        return sum(day.commission_paid for day in self.daily)

    @property
    def total_net_profit(self) -> float:
        return self.total_gross_profit - self.total_commission_paid


def commission_for_day(day: date, gross_profit: float, agents: Iterable[CommissionAgent]) -> float:
    """Every agent that is global or dated ``day`` earns its percentage; no precedence, no cap"""
    return sum(
        gross_profit * agent.percentage / 100 for agent in agents if agent.applies_to(day)
    )


def summarize_days(
    bookings: Iterable[Booking],
    daily_prices: Mapping[date, float],
    default_price: float,
    agents: Iterable[CommissionAgent],
) -> List[DailyProfit]:
    """
    One entry per day that has bookings, most recent first.

    Bookings without stamped prices count seat count times the day's resolved price.
    """
    gross: Dict[date, float] = defaultdict(float)
    seats: Dict[date, int] = defaultdict(int)
    for booking in bookings:
        day = to_day(booking.date)
        day_price = price_for_date(day, daily_prices, default_price)
        gross[day] += booking_value(booking, day_price=day_price)
        seats[day] += booking.seat_count

    agent_list = list(agents)
    return [
        DailyProfit(
            date=day,
            seats_booked=seats[day],
            gross_profit=gross[day],
            commission_paid=commission_for_day(day, gross[day], agent_list),
        )
        for day in sorted(gross, reverse=True)
    ]


def summarize_months(daily: Iterable[DailyProfit]) -> List[MonthlyProfit]:
    """Sums of the daily entries per calendar month, year then month descending"""
    grouped: Dict[str, List[DailyProfit]] = defaultdict(list)
    for day in daily:
        grouped[month_key(day.date)].append(day)

    months = []
    for key, days in grouped.items():
        year, month = parse_month_key(key)
        months.append(
            MonthlyProfit(
                year=year,
                month=month,
                seats_booked=sum(d.seats_booked for d in days),
                gross_profit=sum(d.gross_profit for d in days),
                commission_paid=sum(d.commission_paid for d in days),
                net_profit=sum(d.net_profit for d in days),
            )
        )
    return sorted(months, key=lambda m: (m.year, m.month), reverse=True)


def summarize_agent_payouts(
    daily: Iterable[DailyProfit], agents: Iterable[CommissionAgent]
) -> List[AgentPayout]:
    """
    Total payout per agent over the days it qualifies for, highest first.

    Agents with no qualifying day are listed with 0.0. Equal payouts order by name.
    """
    day_list = list(daily)
    payouts = [
        AgentPayout(
            agent_id=agent.id,
            name=agent.name,
            percentage=agent.percentage,
            applicable_date=agent.applicable_date,
            total_payout=sum(
                day.gross_profit * agent.percentage / 100
                for day in day_list
                if agent.applies_to(day.date)
            ),
        )
        for agent in agents
    ]
    return sorted(payouts, key=lambda p: (-p.total_payout, p.name.lower()))


def build_profit_report(snapshot: StoreSnapshot, default_price: float) -> ProfitReport:
    daily = summarize_days(
        snapshot.bookings, snapshot.price_table, default_price, snapshot.commission_agents
    )
    return ProfitReport(
        daily=daily,
        monthly=summarize_months(daily),
        agent_payouts=summarize_agent_payouts(daily, snapshot.commission_agents),
    )
