# API Route Constants

# Base API
API_BASE = '/api'

# Marketplace routes
MARKETPLACE_BASE = f'{API_BASE}/marketplace'
MARKETPLACE_INITIALIZE = f'{MARKETPLACE_BASE}/initialize'

# Ticket routes
TICKET_BASE = f'{API_BASE}/ticket'
TICKET_MINT = TICKET_BASE
TICKET_RESALE_LIST = f'{TICKET_BASE}/resale'
TICKET_GET = f'{TICKET_BASE}/{{ticket_id}}'
TICKET_OWNER = f'{TICKET_BASE}/{{ticket_id}}/owner'
TICKET_LISTING = f'{TICKET_BASE}/{{ticket_id}}/listing'
TICKET_PURCHASE = f'{TICKET_BASE}/{{ticket_id}}/purchase'

# Event ticket routes
EVENT_BASE = f'{API_BASE}/event'
EVENT_TICKETS = f'{EVENT_BASE}/{{event_id}}/tickets'

# Health
HEALTH = '/health'
