from collections.abc import Iterator
from contextlib import contextmanager
import threading

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_payment_gateway import IPaymentGateway
from src.service.marketplace.domain.marketplace_error import (
    InsufficientFundsError,
    PaymentFailedError,
)


@attrs.frozen
class TokenTransfer:
    asset: str
    from_: str
    to: str
    amount: int


class InMemoryTokenLedger(IPaymentGateway):
    """
    Process-local fungible token balances, keyed by (asset, identity).

    `atomic()` snapshots balances and the transfer journal; an exception
    leaving the scope restores both. Scopes nest, the outermost one wins.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._balances: dict[tuple[str, str], int] = {}
        self.transfers: list[TokenTransfer] = []

    @Logger.io
    def mint(self, *, asset: str, to: str, amount: int) -> None:
        if amount <= 0:
            raise DomainError('Mint amount must be positive')
        with self._lock:
            key = (asset, to)
            self._balances[key] = self._balances.get(key, 0) + amount

    def balance(self, *, asset: str, identity: str) -> int:
        with self._lock:
            return self._balances.get((asset, identity), 0)

    @Logger.io
    def transfer(self, *, asset: str, from_: str, to: str, amount: int) -> None:
        if amount < 0:
            raise PaymentFailedError(f'Negative transfer amount: {amount}')

        with self._lock:
            available = self._balances.get((asset, from_), 0)
            if available < amount:
                raise InsufficientFundsError(identity=from_, balance=available, amount=amount)

            self._balances[(asset, from_)] = available - amount
            self._balances[(asset, to)] = self._balances.get((asset, to), 0) + amount
            self.transfers.append(TokenTransfer(asset=asset, from_=from_, to=to, amount=amount))

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with self._lock:
            balances = dict(self._balances)
            journal_length = len(self.transfers)
            try:
                yield
            except Exception:
                self._balances = balances
                del self.transfers[journal_length:]
                raise
