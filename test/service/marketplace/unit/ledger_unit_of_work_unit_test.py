import threading

import pytest

from src.service.marketplace.domain.entity.registry_entity import Registry
from src.service.marketplace.domain.entity.ticket_entity import Ticket
from src.service.marketplace.driven_adapter.state.in_memory_ledger_store import (
    InMemoryLedgerStore,
)
from src.service.marketplace.driven_adapter.state.ledger_key_str_generator import (
    make_owner_key,
    make_ticket_count_key,
    make_ticket_key,
    make_token_key,
)
from src.service.marketplace.driven_adapter.state.ledger_unit_of_work import LedgerUnitOfWork


def _ticket(ticket_id: int = 0) -> Ticket:
    return Ticket(id=ticket_id, event_id=9, owner='organizer', price=100)


@pytest.fixture
def store() -> InMemoryLedgerStore:
    return InMemoryLedgerStore()


@pytest.fixture
def uow(store) -> LedgerUnitOfWork:
    return LedgerUnitOfWork(store=store)


@pytest.mark.unit
class TestLedgerUnitOfWork:
    def test_staged_writes_are_visible_only_inside(self, uow, store):
        with uow:
            uow.save_ticket(ticket=_ticket())
            assert uow.get_ticket(ticket_id=0) == _ticket()
            assert len(store) == 0

    def test_exit_without_commit_discards_writes(self, uow, store):
        with uow:
            uow.save_ticket(ticket=_ticket())

        with uow:
            assert uow.get_ticket(ticket_id=0) is None
        assert len(store) == 0

    def test_exception_discards_writes(self, uow, store):
        with pytest.raises(ValueError):
            with uow:
                uow.save_ticket(ticket=_ticket())
                raise ValueError('abort')

        assert len(store) == 0

    def test_commit_writes_every_slot(self, uow, store):
        registry = Registry(organizer='organizer', token='usdc', ticket_count=1)

        with uow:
            uow.save_registry(registry=registry)
            uow.save_ticket(ticket=_ticket())
            uow.commit()

        assert len(store) == 4
        for key in (make_owner_key(), make_token_key(), make_ticket_count_key()):
            assert store.get(key=key) is not None
        assert store.get(key=make_ticket_key(ticket_id=0)) is not None

        with uow:
            assert uow.get_registry() == registry
            assert uow.get_ticket(ticket_id=0) == _ticket()

    @pytest.mark.parametrize('price', [2**64, -(2**63) - 1, 2**127 - 1, -(2**127)])
    def test_prices_beyond_64_bits_round_trip(self, uow, price):
        ticket = Ticket(id=0, event_id=9, owner='organizer', price=price, for_sale=True)

        with uow:
            uow.save_ticket(ticket=ticket)
            uow.commit()

        with uow:
            assert uow.get_ticket(ticket_id=0) == ticket

    def test_missing_registry(self, uow):
        with uow:
            assert uow.get_registry() is None

    def test_lock_is_released_on_exit(self, uow, store):
        with uow:
            pass

        acquired = []
        worker = threading.Thread(
            target=lambda: acquired.append(store.command_lock.acquire(timeout=1))
        )
        worker.start()
        worker.join()

        assert acquired == [True]

    def test_other_threads_wait_for_open_unit(self, uow, store):
        acquired = []
        with uow:
            worker = threading.Thread(
                target=lambda: acquired.append(store.command_lock.acquire(timeout=0.05))
            )
            worker.start()
            worker.join()

        assert acquired == [False]
