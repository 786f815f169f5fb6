import pytest

from src.service.marketplace.domain.entity.ticket_entity import Ticket
from src.service.marketplace.domain.marketplace_error import (
    AlreadyListedError,
    InvalidPriceError,
    NotForSaleError,
)
from test.service.marketplace.marketplace_test_constants import BUYER, ORGANIZER


def _minted(price: int = 1_000_000) -> Ticket:
    return Ticket.mint(id=0, event_id=42, owner=ORGANIZER, price=price)


@pytest.mark.unit
class TestTicketMint:
    def test_fresh_ticket_is_not_listed(self):
        ticket = _minted()

        assert ticket.id == 0
        assert ticket.event_id == 42
        assert ticket.owner == ORGANIZER
        assert ticket.price == 1_000_000
        assert ticket.for_sale is False
        assert ticket.is_resale is False

    def test_zero_price_is_allowed(self):
        assert _minted(price=0).price == 0

    def test_negative_price_is_rejected(self):
        with pytest.raises(InvalidPriceError) as exc_info:
            _minted(price=-1)

        assert exc_info.value.price == -1
        assert exc_info.value.status_code == 400


@pytest.mark.unit
class TestTicketListing:
    def test_listing_sets_price_and_flags(self):
        # Given: a freshly minted ticket
        ticket = _minted()

        # When: listed at a new price
        listed = ticket.list_for_resale(new_price=2_000_000)

        # Then: it is for sale and classified as resale, even on its first listing
        assert listed.price == 2_000_000
        assert listed.for_sale is True
        assert listed.is_resale is True
        assert ticket.for_sale is False  # original untouched

    @pytest.mark.parametrize('new_price', [0, -5, 10**30])
    def test_listing_price_is_unbounded(self, new_price):
        assert _minted().list_for_resale(new_price=new_price).price == new_price

    def test_listing_twice_is_rejected(self):
        listed = _minted().list_for_resale(new_price=2_000_000)

        with pytest.raises(AlreadyListedError):
            listed.list_for_resale(new_price=3_000_000)


@pytest.mark.unit
class TestTicketSale:
    def test_unlisted_ticket_cannot_be_sold(self):
        with pytest.raises(NotForSaleError):
            _minted().sell_to(buyer=BUYER)

    def test_sale_transfers_ownership_and_clears_flags(self):
        listed = _minted().list_for_resale(new_price=2_000_000)

        sold = listed.sell_to(buyer=BUYER)

        assert sold.owner == BUYER
        assert sold.for_sale is False
        assert sold.is_resale is False
        assert sold.price == 2_000_000

    def test_sold_ticket_can_be_listed_again(self):
        sold = _minted().list_for_resale(new_price=2_000_000).sell_to(buyer=BUYER)

        relisted = sold.list_for_resale(new_price=2_500_000)

        assert relisted.owner == BUYER
        assert relisted.for_sale is True
        assert relisted.is_resale is True
