from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_auth_provider import IAuthProvider
from src.service.marketplace.app.interface.i_ledger_unit_of_work import ILedgerUnitOfWork
from src.service.marketplace.domain.entity.ticket_entity import Ticket
from src.service.marketplace.domain.marketplace_error import TicketNotFoundError


class ListTicketForResaleUseCase:
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
    def list_for_resale(self, *, ticket_id: int, new_price: int, auth: IAuthProvider) -> Ticket:
        with self.ledger_unit_of_work as uow:
            ticket = uow.get_ticket(ticket_id=ticket_id)
            if ticket is None:
                raise TicketNotFoundError(ticket_id)

            auth.require(ticket.owner)

            listed = ticket.list_for_resale(new_price=new_price)
            uow.save_ticket(ticket=listed)
            uow.commit()

        Logger.base.info(f'[LISTING] Ticket {ticket_id} listed by {listed.owner} at {new_price}')
        return listed
