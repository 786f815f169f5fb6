from abc import ABC, abstractmethod
from contextlib import AbstractContextManager


class IPaymentGateway(ABC):
    """Fungible-token transfer service used to settle purchases."""

    @abstractmethod
    def transfer(self, *, asset: str, from_: str, to: str, amount: int) -> None:
        """
        Move `amount` of `asset` from one identity to another.

        Raises:
            PaymentFailedError: On insufficient balance or any other failure;
                nothing is moved in that case
        """
        pass

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """
        Scope in which every transfer is committed together.

        Any exception leaving the scope reverts all transfers made inside it.
        """
        pass
