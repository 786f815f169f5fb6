from typing import Tuple

import attrs

from src.service.marketplace.domain.entity.ticket_entity import Ticket


COMMISSION_PERCENT = 30
PERCENT_BASE = 100


@attrs.frozen
class PaymentLeg:
    payee: str
    amount: int


@attrs.frozen
class PaymentSplit:
    """Transfers a buyer owes for one purchase, in the order they are issued."""

    legs: Tuple[PaymentLeg, ...]

    @property
    def total(self) -> int:
        return sum(leg.amount for leg in self.legs)

    @classmethod
    def for_purchase(cls, *, ticket: Ticket, organizer: str) -> 'PaymentSplit':
        if ticket.is_resale:
            organizer_fee = ticket.price * COMMISSION_PERCENT // PERCENT_BASE
            seller_amount = ticket.price - organizer_fee
            return cls(
                legs=(
                    PaymentLeg(payee=organizer, amount=organizer_fee),
                    PaymentLeg(payee=ticket.owner, amount=seller_amount),
                )
            )
        return cls(legs=(PaymentLeg(payee=organizer, amount=ticket.price),))
