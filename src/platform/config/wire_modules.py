"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.analytics.app.command import (
    create_commission_agent_use_case,
    delete_commission_agent_use_case,
    update_commission_agent_use_case,
)
from src.service.analytics.app.query import (
    get_profit_report_use_case,
    list_commission_agents_use_case,
)
from src.service.booking.app.command import (
    create_booking_use_case,
    edit_seat_price_use_case,
    remove_booking_seat_use_case,
    set_daily_price_use_case,
)
from src.service.booking.app.query import (
    apply_selection_action_use_case,
    get_booking_use_case,
    get_calendar_month_use_case,
    get_date_overview_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    create_booking_use_case,
    remove_booking_seat_use_case,
    edit_seat_price_use_case,
    set_daily_price_use_case,
    get_date_overview_use_case,
    get_calendar_month_use_case,
    get_booking_use_case,
    apply_selection_action_use_case,
    get_profit_report_use_case,
    list_commission_agents_use_case,
    create_commission_agent_use_case,
    update_commission_agent_use_case,
    delete_commission_agent_use_case,
]
