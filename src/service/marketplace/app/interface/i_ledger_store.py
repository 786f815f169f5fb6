from abc import ABC, abstractmethod
from collections.abc import Mapping
import threading


class ILedgerStore(ABC):
    """
    Durable key/value substrate holding the ledger slots.

    `command_lock` serializes units of work so that one ledger operation
    completes before the next one reads.
    """

    def __init__(self) -> None:
        self.command_lock = threading.RLock()

    @abstractmethod
    def get(self, *, key: str) -> bytes | str | None:
        pass

    @abstractmethod
    def write_batch(self, *, items: Mapping[str, bytes]) -> None:
        """Write every item or none of them."""
        pass
