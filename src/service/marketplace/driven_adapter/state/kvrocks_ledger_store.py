from collections.abc import Mapping

from src.platform.logging.loguru_io import Logger
from src.platform.state.kvrocks_client import KvrocksClient
from src.service.marketplace.app.interface.i_ledger_store import ILedgerStore


class KvrocksLedgerStore(ILedgerStore):
    """
    Ledger store on Kvrocks (Redis protocol).

    Batches go through a MULTI/EXEC pipeline so readers never observe a
    partially applied unit of work.
    """

    def __init__(self, *, kvrocks_client: KvrocksClient) -> None:
        super().__init__()
        self.kvrocks_client = kvrocks_client

    def get(self, *, key: str) -> bytes | str | None:
        return self.kvrocks_client.get_client().get(key)

    @Logger.io
    def write_batch(self, *, items: Mapping[str, bytes]) -> None:
        if not items:
            return
        client = self.kvrocks_client.get_client()
        with client.pipeline(transaction=True) as pipe:
            for key, value in items.items():
                pipe.set(key, value)
            pipe.execute()
