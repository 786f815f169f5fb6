from collections.abc import Mapping

from src.service.marketplace.app.interface.i_ledger_store import ILedgerStore


class InMemoryLedgerStore(ILedgerStore):
    """Process-local ledger store; the default backend and the one unit tests use."""

    def __init__(self) -> None:
        super().__init__()
        self._data: dict[str, bytes] = {}

    def get(self, *, key: str) -> bytes | None:
        return self._data.get(key)

    def write_batch(self, *, items: Mapping[str, bytes]) -> None:
        with self.command_lock:
            # Build the next state first so a bad item cannot leave a half-applied batch
            self._data = {**self._data, **items}

    def __len__(self) -> int:
        return len(self._data)
