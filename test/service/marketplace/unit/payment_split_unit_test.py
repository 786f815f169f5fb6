import pytest

from src.service.marketplace.domain.entity.ticket_entity import Ticket
from src.service.marketplace.domain.value_object.payment_split import PaymentLeg, PaymentSplit
from test.service.marketplace.marketplace_test_constants import ORGANIZER, RESELLER


def _listed_ticket(*, price: int, is_resale: bool) -> Ticket:
    return Ticket(
        id=0,
        event_id=1,
        owner=RESELLER,
        price=price,
        for_sale=True,
        is_resale=is_resale,
    )


@pytest.mark.unit
class TestPrimarySaleSplit:
    def test_full_price_goes_to_organizer(self):
        split = PaymentSplit.for_purchase(
            ticket=_listed_ticket(price=2_000_000, is_resale=False), organizer=ORGANIZER
        )

        assert split.legs == (PaymentLeg(payee=ORGANIZER, amount=2_000_000),)
        assert split.total == 2_000_000


@pytest.mark.unit
class TestResaleSplit:
    def test_commission_and_seller_share(self):
        split = PaymentSplit.for_purchase(
            ticket=_listed_ticket(price=2_000_000, is_resale=True), organizer=ORGANIZER
        )

        assert split.legs == (
            PaymentLeg(payee=ORGANIZER, amount=600_000),
            PaymentLeg(payee=RESELLER, amount=1_400_000),
        )

    def test_commission_is_floored(self):
        # 7 * 30 / 100 = 2.1
        split = PaymentSplit.for_purchase(
            ticket=_listed_ticket(price=7, is_resale=True), organizer=ORGANIZER
        )

        assert [leg.amount for leg in split.legs] == [2, 5]

    @pytest.mark.parametrize('price', [0, 1, 3, 99, 101, 1_234_567, 10**20 + 1])
    def test_legs_sum_to_price(self, price):
        split = PaymentSplit.for_purchase(
            ticket=_listed_ticket(price=price, is_resale=True), organizer=ORGANIZER
        )

        assert split.total == price
        assert split.legs[0].amount == price * 30 // 100
