"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.marketplace.app.command import (
    initialize_marketplace_use_case,
    list_ticket_for_resale_use_case,
    mint_ticket_use_case,
    purchase_ticket_use_case,
)
from src.service.marketplace.app.query import (
    get_ticket_use_case,
    list_event_tickets_use_case,
    list_resale_tickets_use_case,
)
from src.service.marketplace.driving_adapter.http_controller.auth import caller_auth


WIRE_MODULES: list[ModuleType] = [
    initialize_marketplace_use_case,
    mint_ticket_use_case,
    list_ticket_for_resale_use_case,
    purchase_ticket_use_case,
    get_ticket_use_case,
    list_resale_tickets_use_case,
    list_event_tickets_use_case,
    caller_auth,
]
