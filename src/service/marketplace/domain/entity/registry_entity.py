import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger


# Ticket ids and the counter are unsigned 32-bit
U32_MAX = 0xFFFF_FFFF


@attrs.define
class Registry:
    """Marketplace-wide configuration: organizer, payment asset and ticket counter."""

    organizer: str
    token: str
    ticket_count: int = 0

    @classmethod
    @Logger.io
    def create(cls, *, organizer: str, token: str) -> 'Registry':
        return cls(organizer=organizer, token=token, ticket_count=0)

    @Logger.io
    def allocate_ticket_id(self) -> tuple[int, 'Registry']:
        """
        Hand out the next sequential ticket id.

        Returns:
            The allocated id and the registry with its counter advanced by one
        """
        if self.ticket_count >= U32_MAX:
            raise DomainError('Ticket id space exhausted')
        return self.ticket_count, attrs.evolve(self, ticket_count=self.ticket_count + 1)
