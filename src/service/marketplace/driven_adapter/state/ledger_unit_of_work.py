from typing import Any

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_ledger_store import ILedgerStore
from src.service.marketplace.app.interface.i_ledger_unit_of_work import ILedgerUnitOfWork
from src.service.marketplace.domain.entity.registry_entity import Registry
from src.service.marketplace.domain.entity.ticket_entity import Ticket
from src.service.marketplace.driven_adapter.state.ledger_key_str_generator import (
    make_owner_key,
    make_ticket_count_key,
    make_ticket_key,
    make_token_key,
)
from src.service.marketplace.driven_adapter.state.ledger_record_codec import (
    decode_count,
    decode_identity,
    decode_ticket,
    encode_count,
    encode_identity,
    encode_ticket,
)


class LedgerUnitOfWork(ILedgerUnitOfWork):
    """
    Key/value implementation of the ledger unit of work.

    Holds the store's command lock for the whole `with` block, which is what
    serializes ledger operations across request threads.
    """

    def __init__(self, *, store: ILedgerStore) -> None:
        self.store = store
        self._staged: dict[str, bytes] = {}

    def __enter__(self) -> 'LedgerUnitOfWork':
        self.store.command_lock.acquire()
        self._staged = {}
        return self

    def __exit__(self, *args: Any) -> None:
        try:
            super().__exit__(*args)
        finally:
            self.store.command_lock.release()

    def _read(self, key: str) -> bytes | str | None:
        if key in self._staged:
            return self._staged[key]
        return self.store.get(key=key)

    def get_registry(self) -> Registry | None:
        owner_raw = self._read(make_owner_key())
        if owner_raw is None:
            return None

        token_raw = self._read(make_token_key())
        count_raw = self._read(make_ticket_count_key())
        if token_raw is None:
            raise RuntimeError('Ledger corrupted: organizer set without payment asset')

        return Registry(
            organizer=decode_identity(owner_raw),
            token=decode_identity(token_raw),
            ticket_count=decode_count(count_raw) if count_raw is not None else 0,
        )

    def save_registry(self, *, registry: Registry) -> None:
        self._staged[make_owner_key()] = encode_identity(registry.organizer)
        self._staged[make_token_key()] = encode_identity(registry.token)
        self._staged[make_ticket_count_key()] = encode_count(registry.ticket_count)

    def get_ticket(self, *, ticket_id: int) -> Ticket | None:
        raw = self._read(make_ticket_key(ticket_id=ticket_id))
        return decode_ticket(raw) if raw is not None else None

    def save_ticket(self, *, ticket: Ticket) -> None:
        self._staged[make_ticket_key(ticket_id=ticket.id)] = encode_ticket(ticket)

    @Logger.io
    def commit(self) -> None:
        if not self._staged:
            return
        self.store.write_batch(items=dict(self._staged))
        self._staged = {}

    def rollback(self) -> None:
        self._staged = {}
