from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_ledger_unit_of_work import ILedgerUnitOfWork
from src.service.marketplace.domain.entity.ticket_entity import Ticket


class ListResaleTicketsUseCase:
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
    def list_resale_tickets(self) -> List[Ticket]:
        """Listed resale tickets in ascending id order; empty before initialization."""
        tickets: List[Ticket] = []
        with self.ledger_unit_of_work as uow:
            registry = uow.get_registry()
            if registry is None:
                return tickets

            for ticket_id in range(registry.ticket_count):
                ticket = uow.get_ticket(ticket_id=ticket_id)
                if ticket is not None and ticket.for_sale and ticket.is_resale:
                    tickets.append(ticket)
        return tickets
