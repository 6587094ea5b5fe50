# API Route Constants

# Base API
API_BASE = '/api'

# Booking view: date overview, calendar, bookings, seat edits, daily price, selection
BOOKING_BASE = f'{API_BASE}/booking'

# Analytics view: profit report, commission agents
ANALYTICS_BASE = f'{API_BASE}/analytics'
