"""
Marketplace fixtures

Use cases are wired by hand against an in-memory store and token ledger, so
unit tests never touch the DI container.
"""

from typing import Any

import pytest

from src.service.marketplace.app.command.initialize_marketplace_use_case import (
    InitializeMarketplaceUseCase,
)
from src.service.marketplace.app.command.list_ticket_for_resale_use_case import (
    ListTicketForResaleUseCase,
)
from src.service.marketplace.app.command.mint_ticket_use_case import MintTicketUseCase
from src.service.marketplace.app.command.purchase_ticket_use_case import PurchaseTicketUseCase
from src.service.marketplace.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.marketplace.app.query.list_event_tickets_use_case import ListEventTicketsUseCase
from src.service.marketplace.app.query.list_resale_tickets_use_case import (
    ListResaleTicketsUseCase,
)
from src.service.marketplace.driven_adapter.auth.signatory_auth_provider import (
    SignatoryAuthProvider,
)
from src.service.marketplace.driven_adapter.payment.in_memory_token_ledger import (
    InMemoryTokenLedger,
)
from src.service.marketplace.driven_adapter.state.in_memory_ledger_store import (
    InMemoryLedgerStore,
)
from src.service.marketplace.driven_adapter.state.ledger_unit_of_work import LedgerUnitOfWork
from test.service.marketplace.marketplace_test_constants import (
    BUYER,
    ORGANIZER,
    RESELLER,
    TOKEN,
)


@pytest.fixture
def ledger_store() -> InMemoryLedgerStore:
    return InMemoryLedgerStore()


@pytest.fixture
def ledger_unit_of_work(ledger_store: InMemoryLedgerStore) -> LedgerUnitOfWork:
    return LedgerUnitOfWork(store=ledger_store)


@pytest.fixture
def token_ledger() -> InMemoryTokenLedger:
    return InMemoryTokenLedger()


@pytest.fixture
def everyone() -> SignatoryAuthProvider:
    """Auth provider signed by every party the tests act as."""
    return SignatoryAuthProvider(ORGANIZER, BUYER, RESELLER)


@pytest.fixture
def initialize_use_case(ledger_unit_of_work: LedgerUnitOfWork) -> InitializeMarketplaceUseCase:
    return InitializeMarketplaceUseCase(ledger_unit_of_work=ledger_unit_of_work)


@pytest.fixture
def mint_use_case(ledger_unit_of_work: LedgerUnitOfWork) -> MintTicketUseCase:
    return MintTicketUseCase(ledger_unit_of_work=ledger_unit_of_work)


@pytest.fixture
def list_for_resale_use_case(ledger_unit_of_work: LedgerUnitOfWork) -> ListTicketForResaleUseCase:
    return ListTicketForResaleUseCase(ledger_unit_of_work=ledger_unit_of_work)


@pytest.fixture
def purchase_use_case(
    ledger_unit_of_work: LedgerUnitOfWork, token_ledger: InMemoryTokenLedger
) -> PurchaseTicketUseCase:
    return PurchaseTicketUseCase(
        ledger_unit_of_work=ledger_unit_of_work, payment_gateway=token_ledger
    )


@pytest.fixture
def get_ticket_use_case(ledger_unit_of_work: LedgerUnitOfWork) -> GetTicketUseCase:
    return GetTicketUseCase(ledger_unit_of_work=ledger_unit_of_work)


@pytest.fixture
def list_resale_use_case(ledger_unit_of_work: LedgerUnitOfWork) -> ListResaleTicketsUseCase:
    return ListResaleTicketsUseCase(ledger_unit_of_work=ledger_unit_of_work)


@pytest.fixture
def list_event_use_case(ledger_unit_of_work: LedgerUnitOfWork) -> ListEventTicketsUseCase:
    return ListEventTicketsUseCase(ledger_unit_of_work=ledger_unit_of_work)


@pytest.fixture
def initialized_marketplace(
    initialize_use_case: InitializeMarketplaceUseCase,
    everyone: SignatoryAuthProvider,
) -> None:
    initialize_use_case.initialize(organizer=ORGANIZER, token=TOKEN, auth=everyone)


@pytest.fixture
def context() -> dict[str, Any]:
    """Shared test context for storing state between BDD steps"""
    return {}
