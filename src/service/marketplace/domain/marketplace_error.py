"""
Marketplace error taxonomy.

Every error aborts the enclosing ledger operation before anything is committed.
"""

from src.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    PaymentRequiredError,
)


class AlreadyInitializedError(ConflictError):
    def __init__(self) -> None:
        super().__init__('Marketplace already initialized')


class NotInitializedError(DomainError):
    def __init__(self) -> None:
        super().__init__('Marketplace not initialized')


class InvalidPriceError(DomainError):
    def __init__(self, price: int) -> None:
        self.price = price
        super().__init__(f'Invalid price: {price}')


class TicketNotFoundError(NotFoundError):
    def __init__(self, ticket_id: int) -> None:
        self.ticket_id = ticket_id
        super().__init__(f'Ticket {ticket_id} not found')


class UnauthorizedError(ForbiddenError):
    def __init__(self, identity: str) -> None:
        self.identity = identity
        super().__init__(f'Authorization by {identity} required')


class AlreadyListedError(ConflictError):
    def __init__(self, ticket_id: int) -> None:
        self.ticket_id = ticket_id
        super().__init__(f'Ticket {ticket_id} is already listed for sale')


class NotForSaleError(DomainError):
    def __init__(self, ticket_id: int) -> None:
        self.ticket_id = ticket_id
        super().__init__(f'Ticket {ticket_id} is not for sale')


class PaymentFailedError(PaymentRequiredError):
    pass


class InsufficientFundsError(PaymentFailedError):
    def __init__(self, *, identity: str, balance: int, amount: int) -> None:
        self.identity = identity
        self.balance = balance
        self.amount = amount
        super().__init__(f'Insufficient funds: {identity} holds {balance}, needs {amount}')
