import attrs

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.domain.marketplace_error import (
    AlreadyListedError,
    InvalidPriceError,
    NotForSaleError,
)


@attrs.define
class Ticket:
    id: int
    event_id: int
    owner: str
    price: int
    for_sale: bool = False
    is_resale: bool = False

    @staticmethod
    def validate_mint_price(price: int) -> None:
        if price < 0:
            raise InvalidPriceError(price)

    @classmethod
    @Logger.io
    def mint(cls, *, id: int, event_id: int, owner: str, price: int) -> 'Ticket':
        cls.validate_mint_price(price)
        return cls(
            id=id,
            event_id=event_id,
            owner=owner,
            price=price,
            for_sale=False,
            is_resale=False,
        )

    @Logger.io
    def list_for_resale(self, *, new_price: int) -> 'Ticket':
        """
        Open a listing at `new_price`.

        Every listing is flagged as a resale, including the organizer's first
        listing of a freshly minted ticket. No bound is enforced on the price.

        Raises:
            AlreadyListedError: When the ticket is already for sale
        """
        if self.for_sale:
            raise AlreadyListedError(self.id)
        return attrs.evolve(self, price=new_price, for_sale=True, is_resale=True)

    @Logger.io
    def validate_can_be_purchased(self) -> None:
        if not self.for_sale:
            raise NotForSaleError(self.id)

    @Logger.io
    def sell_to(self, *, buyer: str) -> 'Ticket':
        self.validate_can_be_purchased()
        return attrs.evolve(self, owner=buyer, for_sale=False, is_resale=False)
