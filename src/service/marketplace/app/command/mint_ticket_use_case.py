from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_auth_provider import IAuthProvider
from src.service.marketplace.app.interface.i_ledger_unit_of_work import ILedgerUnitOfWork
from src.service.marketplace.domain.entity.ticket_entity import Ticket
from src.service.marketplace.domain.marketplace_error import NotInitializedError


class MintTicketUseCase:
    def __init__(self, *, ledger_unit_of_work: ILedgerUnitOfWork) -> None:
        self.ledger_unit_of_work = ledger_unit_of_work

    @classmethod
    @inject
    def depends(
        cls,
        ledger_unit_of_work: ILedgerUnitOfWork = Depends(Provide[Container.ledger_unit_of_work]),
    ) -> Self:
        return cls(ledger_unit_of_work=ledger_unit_of_work)

    @Logger.io
    def mint(self, *, event_id: int, price: int, auth: IAuthProvider) -> int:
        """
        Issue a new ticket owned by the organizer and return its id.

        Checks run in order: price, registry, organizer authorization.

        Raises:
            InvalidPriceError: When price is negative
            NotInitializedError: When the marketplace has no registry
            UnauthorizedError: When the caller is not the organizer
        """
        Ticket.validate_mint_price(price)

        with self.ledger_unit_of_work as uow:
            registry = uow.get_registry()
            if registry is None:
                raise NotInitializedError()

            auth.require(registry.organizer)

            ticket_id, registry = registry.allocate_ticket_id()
            ticket = Ticket.mint(
                id=ticket_id,
                event_id=event_id,
                owner=registry.organizer,
                price=price,
            )

            uow.save_ticket(ticket=ticket)
            uow.save_registry(registry=registry)
            uow.commit()

        Logger.base.info(f'[MINT] Ticket {ticket.id} for event {event_id} at {price}')
        return ticket.id
