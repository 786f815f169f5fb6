from fastapi import APIRouter, Depends, Path, status

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.initialize_marketplace_use_case import (
    InitializeMarketplaceUseCase,
)
from src.service.marketplace.app.command.list_ticket_for_resale_use_case import (
    ListTicketForResaleUseCase,
)
from src.service.marketplace.app.command.mint_ticket_use_case import MintTicketUseCase
from src.service.marketplace.app.command.purchase_ticket_use_case import PurchaseTicketUseCase
from src.service.marketplace.app.interface.i_auth_provider import IAuthProvider
from src.service.marketplace.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.marketplace.app.query.list_event_tickets_use_case import ListEventTicketsUseCase
from src.service.marketplace.app.query.list_resale_tickets_use_case import (
    ListResaleTicketsUseCase,
)
from src.service.marketplace.domain.entity.registry_entity import U32_MAX
from src.service.marketplace.domain.entity.ticket_entity import Ticket
from src.service.marketplace.driving_adapter.http_controller.auth.caller_auth import (
    get_caller_auth_provider,
)
from src.service.marketplace.driving_adapter.http_controller.schema.ticket_schema import (
    InitializeMarketplaceRequest,
    ListTicketRequest,
    MarketplaceResponse,
    MintTicketRequest,
    PurchaseTicketRequest,
    TicketListResponse,
    TicketOwnerResponse,
    TicketResponse,
)


marketplace_router = APIRouter()
ticket_router = APIRouter()
event_router = APIRouter()


def _to_ticket_response(ticket: Ticket) -> TicketResponse:
    return TicketResponse(
        id=ticket.id,
        event_id=ticket.event_id,
        owner=ticket.owner,
        price=ticket.price,
        for_sale=ticket.for_sale,
        is_resale=ticket.is_resale,
    )


@marketplace_router.post('/initialize', status_code=status.HTTP_201_CREATED)
@Logger.io
def initialize_marketplace(
    request: InitializeMarketplaceRequest,
    auth: IAuthProvider = Depends(get_caller_auth_provider),
    use_case: InitializeMarketplaceUseCase = Depends(InitializeMarketplaceUseCase.depends),
) -> MarketplaceResponse:
    registry = use_case.initialize(organizer=request.organizer, token=request.token, auth=auth)
    return MarketplaceResponse(
        organizer=registry.organizer,
        token=registry.token,
        ticket_count=registry.ticket_count,
    )


@ticket_router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
def mint_ticket(
    request: MintTicketRequest,
    auth: IAuthProvider = Depends(get_caller_auth_provider),
    use_case: MintTicketUseCase = Depends(MintTicketUseCase.depends),
    query_use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketResponse:
    ticket_id = use_case.mint(event_id=request.event_id, price=request.price, auth=auth)
    return _to_ticket_response(query_use_case.get_ticket(ticket_id=ticket_id))


# Declared before /{ticket_id} so "resale" is not parsed as an id
@ticket_router.get('/resale')
@Logger.io
def list_resale_tickets(
    use_case: ListResaleTicketsUseCase = Depends(ListResaleTicketsUseCase.depends),
) -> TicketListResponse:
    tickets = use_case.list_resale_tickets()
    return TicketListResponse(tickets=[_to_ticket_response(ticket) for ticket in tickets])


@ticket_router.get('/{ticket_id}')
@Logger.io
def get_ticket(
    ticket_id: int = Path(ge=0, le=U32_MAX),
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketResponse:
    return _to_ticket_response(use_case.get_ticket(ticket_id=ticket_id))


@ticket_router.get('/{ticket_id}/owner')
@Logger.io
def get_ticket_owner(
    ticket_id: int = Path(ge=0, le=U32_MAX),
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketOwnerResponse:
    return TicketOwnerResponse(ticket_id=ticket_id, owner=use_case.get_owner(ticket_id=ticket_id))


@ticket_router.post('/{ticket_id}/listing')
@Logger.io
def list_ticket_for_resale(
    request: ListTicketRequest,
    ticket_id: int = Path(ge=0, le=U32_MAX),
    auth: IAuthProvider = Depends(get_caller_auth_provider),
    use_case: ListTicketForResaleUseCase = Depends(ListTicketForResaleUseCase.depends),
) -> TicketResponse:
    ticket = use_case.list_for_resale(ticket_id=ticket_id, new_price=request.new_price, auth=auth)
    return _to_ticket_response(ticket)


@ticket_router.post('/{ticket_id}/purchase')
@Logger.io
def purchase_ticket(
    request: PurchaseTicketRequest,
    ticket_id: int = Path(ge=0, le=U32_MAX),
    auth: IAuthProvider = Depends(get_caller_auth_provider),
    use_case: PurchaseTicketUseCase = Depends(PurchaseTicketUseCase.depends),
) -> TicketResponse:
    ticket = use_case.purchase(ticket_id=ticket_id, buyer=request.buyer, auth=auth)
    return _to_ticket_response(ticket)


@event_router.get('/{event_id}/tickets')
@Logger.io
def list_event_tickets(
    event_id: int = Path(ge=0, le=U32_MAX),
    use_case: ListEventTicketsUseCase = Depends(ListEventTicketsUseCase.depends),
) -> TicketListResponse:
    tickets = use_case.list_event_tickets(event_id=event_id)
    return TicketListResponse(tickets=[_to_ticket_response(ticket) for ticket in tickets])
