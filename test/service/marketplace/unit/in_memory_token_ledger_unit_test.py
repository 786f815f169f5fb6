import pytest

from src.platform.exception.exceptions import DomainError
from src.service.marketplace.domain.marketplace_error import (
    InsufficientFundsError,
    PaymentFailedError,
)
from src.service.marketplace.driven_adapter.payment.in_memory_token_ledger import (
    InMemoryTokenLedger,
    TokenTransfer,
)


ASSET = 'usdc'


@pytest.fixture
def ledger() -> InMemoryTokenLedger:
    ledger = InMemoryTokenLedger()
    ledger.mint(asset=ASSET, to='alice', amount=1_000)
    return ledger


@pytest.mark.unit
class TestTokenLedgerBalances:
    def test_unknown_identity_has_zero_balance(self, ledger):
        assert ledger.balance(asset=ASSET, identity='nobody') == 0

    def test_balances_are_per_asset(self, ledger):
        assert ledger.balance(asset='other', identity='alice') == 0

    @pytest.mark.parametrize('amount', [0, -1])
    def test_mint_requires_positive_amount(self, ledger, amount):
        with pytest.raises(DomainError):
            ledger.mint(asset=ASSET, to='alice', amount=amount)


@pytest.mark.unit
class TestTokenLedgerTransfer:
    def test_transfer_moves_balance(self, ledger):
        ledger.transfer(asset=ASSET, from_='alice', to='bob', amount=400)

        assert ledger.balance(asset=ASSET, identity='alice') == 600
        assert ledger.balance(asset=ASSET, identity='bob') == 400
        assert ledger.transfers == [TokenTransfer(asset=ASSET, from_='alice', to='bob', amount=400)]

    def test_zero_transfer_is_allowed(self, ledger):
        ledger.transfer(asset=ASSET, from_='nobody', to='bob', amount=0)

        assert ledger.balance(asset=ASSET, identity='bob') == 0

    def test_insufficient_balance(self, ledger):
        with pytest.raises(InsufficientFundsError) as exc_info:
            ledger.transfer(asset=ASSET, from_='alice', to='bob', amount=1_001)

        assert (exc_info.value.balance, exc_info.value.amount) == (1_000, 1_001)
        assert ledger.balance(asset=ASSET, identity='alice') == 1_000
        assert ledger.transfers == []

    def test_negative_amount_is_rejected(self, ledger):
        with pytest.raises(PaymentFailedError):
            ledger.transfer(asset=ASSET, from_='alice', to='bob', amount=-1)


@pytest.mark.unit
class TestTokenLedgerAtomic:
    def test_exception_reverts_all_transfers_in_scope(self, ledger):
        with pytest.raises(RuntimeError):
            with ledger.atomic():
                ledger.transfer(asset=ASSET, from_='alice', to='bob', amount=300)
                ledger.transfer(asset=ASSET, from_='alice', to='carol', amount=300)
                raise RuntimeError('commit failed')

        assert ledger.balance(asset=ASSET, identity='alice') == 1_000
        assert ledger.balance(asset=ASSET, identity='bob') == 0
        assert ledger.transfers == []

    def test_successful_scope_keeps_transfers(self, ledger):
        with ledger.atomic():
            ledger.transfer(asset=ASSET, from_='alice', to='bob', amount=300)

        assert ledger.balance(asset=ASSET, identity='bob') == 300

    def test_nested_failure_is_reverted_by_outer_scope(self, ledger):
        with pytest.raises(InsufficientFundsError):
            with ledger.atomic():
                ledger.transfer(asset=ASSET, from_='alice', to='bob', amount=300)
                with ledger.atomic():
                    ledger.transfer(asset=ASSET, from_='alice', to='bob', amount=5_000)

        assert ledger.balance(asset=ASSET, identity='alice') == 1_000
        assert len(ledger.transfers) == 0
