"""
Ledger Unit of Work

- Reads go through the UoW and see its own staged writes
- Writes are staged and become visible only on commit
- Leaving the context without commit discards staged writes

Usage:
    with uow:
        registry = uow.get_registry()
        uow.save_ticket(ticket=ticket)
        uow.commit()
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from src.service.marketplace.domain.entity.registry_entity import Registry
    from src.service.marketplace.domain.entity.ticket_entity import Ticket


class ILedgerUnitOfWork(abc.ABC):
    def __enter__(self) -> ILedgerUnitOfWork:
        return self

    def __exit__(self, *args: Any) -> None:
        self.rollback()

    @abc.abstractmethod
    def get_registry(self) -> Registry | None:
        pass

    @abc.abstractmethod
    def save_registry(self, *, registry: Registry) -> None:
        pass

    @abc.abstractmethod
    def get_ticket(self, *, ticket_id: int) -> Ticket | None:
        pass

    @abc.abstractmethod
    def save_ticket(self, *, ticket: Ticket) -> None:
        pass

    @abc.abstractmethod
    def commit(self) -> None:
        pass

    @abc.abstractmethod
    def rollback(self) -> None:
        pass
