"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/providers/selector.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.marketplace.driven_adapter.payment.in_memory_token_ledger import (
    InMemoryTokenLedger,
)
from src.service.marketplace.driven_adapter.state.in_memory_ledger_store import (
    InMemoryLedgerStore,
)
from src.service.marketplace.driven_adapter.state.kvrocks_ledger_store import KvrocksLedgerStore
from src.service.marketplace.driven_adapter.state.ledger_unit_of_work import LedgerUnitOfWork
from src.service.marketplace.driving_adapter.http_controller.auth.jwt_identity_prover import (
    JwtIdentityProver,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Infrastructure
    kvrocks_client = providers.Object(kvrocks_client)

    # Ledger store, chosen by LEDGER_STORE_BACKEND
    ledger_store = providers.Selector(
        config_service.provided.LEDGER_STORE_BACKEND,
        memory=providers.Singleton(InMemoryLedgerStore),
        kvrocks=providers.Singleton(KvrocksLedgerStore, kvrocks_client=kvrocks_client),
    )

    # One unit of work per operation, all sharing the store (and its command lock)
    ledger_unit_of_work = providers.Factory(LedgerUnitOfWork, store=ledger_store)

    # Payment gateway
    token_ledger = providers.Singleton(InMemoryTokenLedger)

    # Auth service
    jwt_identity_prover = providers.Singleton(JwtIdentityProver)


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
