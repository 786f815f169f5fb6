from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_ledger_unit_of_work import ILedgerUnitOfWork
from src.service.marketplace.domain.entity.ticket_entity import Ticket
from src.service.marketplace.domain.marketplace_error import TicketNotFoundError


class GetTicketUseCase:
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
    def get_ticket(self, *, ticket_id: int) -> Ticket:
        with self.ledger_unit_of_work as uow:
            ticket = uow.get_ticket(ticket_id=ticket_id)
        if ticket is None:
            raise TicketNotFoundError(ticket_id)
        return ticket

    @Logger.io
    def get_owner(self, *, ticket_id: int) -> str:
        return self.get_ticket(ticket_id=ticket_id).owner
