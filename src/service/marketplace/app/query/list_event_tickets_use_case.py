from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_ledger_unit_of_work import ILedgerUnitOfWork
from src.service.marketplace.domain.entity.ticket_entity import Ticket


class ListEventTicketsUseCase:
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
    def list_event_tickets(self, *, event_id: int) -> List[Ticket]:
        tickets: List[Ticket] = []
        with self.ledger_unit_of_work as uow:
            registry = uow.get_registry()
            ticket_count = registry.ticket_count if registry is not None else 0

            for ticket_id in range(ticket_count):
                ticket = uow.get_ticket(ticket_id=ticket_id)
                if ticket is not None and ticket.event_id == event_id:
                    tickets.append(ticket)
        return tickets
