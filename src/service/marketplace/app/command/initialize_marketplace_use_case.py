from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_auth_provider import IAuthProvider
from src.service.marketplace.app.interface.i_ledger_unit_of_work import ILedgerUnitOfWork
from src.service.marketplace.domain.entity.registry_entity import Registry
from src.service.marketplace.domain.marketplace_error import AlreadyInitializedError


class InitializeMarketplaceUseCase:
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
    def initialize(self, *, organizer: str, token: str, auth: IAuthProvider) -> Registry:
        """
        Create the one and only registry of this marketplace.

        The organizer authorizes its own initialization.

        Raises:
            AlreadyInitializedError: When a registry already exists
            UnauthorizedError: When the caller cannot act as `organizer`
        """
        with self.ledger_unit_of_work as uow:
            if uow.get_registry() is not None:
                raise AlreadyInitializedError()

            auth.require(organizer)

            registry = Registry.create(organizer=organizer, token=token)
            uow.save_registry(registry=registry)
            uow.commit()

        Logger.base.info(f'[MARKETPLACE] Initialized by {organizer}, payment asset {token}')
        return registry
