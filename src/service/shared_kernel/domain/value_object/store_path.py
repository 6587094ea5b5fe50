"""
Store paths

Every record lives at ``<collection>/<record key>``; change notifications name
the path that was written.
"""

BOOKINGS = 'bookings'
DAILY_PRICES = 'dailyPrices'
COMMISSION_AGENTS = 'commissionAgents'


def make_store_path(*, collection: str, record_key: str) -> str:
    return f'{collection}/{record_key}'
