from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_auth_provider import IAuthProvider
from src.service.marketplace.app.interface.i_ledger_unit_of_work import ILedgerUnitOfWork
from src.service.marketplace.app.interface.i_payment_gateway import IPaymentGateway
from src.service.marketplace.domain.entity.ticket_entity import Ticket
from src.service.marketplace.domain.marketplace_error import (
    NotInitializedError,
    TicketNotFoundError,
)
from src.service.marketplace.domain.value_object.payment_split import PaymentSplit


class PurchaseTicketUseCase:
    """
    Purchase a listed ticket.

    Flow:
    1. Load the ticket and check it is listed (Fail Fast)
    2. Buyer authorizes its own spend
    3. Resolve organizer and payment asset from the registry
    4. Inside one payment scope: issue every transfer, then commit the new owner

    A failed transfer or commit reverts the payment scope, and the unit of work
    discards its staged writes, so ownership and payment never diverge.
    """

    def __init__(
        self,
        *,
        ledger_unit_of_work: ILedgerUnitOfWork,
        payment_gateway: IPaymentGateway,
    ) -> None:
        self.ledger_unit_of_work = ledger_unit_of_work
        self.payment_gateway = payment_gateway
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        ledger_unit_of_work: ILedgerUnitOfWork = Depends(Provide[Container.ledger_unit_of_work]),
        payment_gateway: IPaymentGateway = Depends(Provide[Container.token_ledger]),
    ) -> Self:
        return cls(ledger_unit_of_work=ledger_unit_of_work, payment_gateway=payment_gateway)

    @Logger.io
    def purchase(self, *, ticket_id: int, buyer: str, auth: IAuthProvider) -> Ticket:
        """
        Raises:
            TicketNotFoundError: When no ticket has this id
            NotForSaleError: When the ticket is not listed
            UnauthorizedError: When the caller cannot act as `buyer`
            NotInitializedError: When the marketplace has no registry
            PaymentFailedError: When any transfer fails; nothing changes
        """
        with self.tracer.start_as_current_span(
            'use_case.purchase_ticket',
            attributes={'ticket.id': ticket_id},
        ):
            with self.ledger_unit_of_work as uow:
                ticket = uow.get_ticket(ticket_id=ticket_id)
                if ticket is None:
                    raise TicketNotFoundError(ticket_id)

                ticket.validate_can_be_purchased()
                auth.require(buyer)

                registry = uow.get_registry()
                if registry is None:
                    raise NotInitializedError()

                split = PaymentSplit.for_purchase(ticket=ticket, organizer=registry.organizer)
                sold = ticket.sell_to(buyer=buyer)

                with self.payment_gateway.atomic():
                    for leg in split.legs:
                        self.payment_gateway.transfer(
                            asset=registry.token,
                            from_=buyer,
                            to=leg.payee,
                            amount=leg.amount,
                        )
                    uow.save_ticket(ticket=sold)
                    uow.commit()

            Logger.base.info(
                f'[PURCHASE] Ticket {ticket_id} sold by {ticket.owner} to {buyer} '
                f'for {split.total} in {len(split.legs)} transfer(s)'
            )
            return sold
