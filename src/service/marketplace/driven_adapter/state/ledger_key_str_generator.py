"""
Ledger Key String Generator

Keys for the four ledger slots: Ticket(id), TicketCount, Owner, Token.
"""

from enum import StrEnum

from src.platform.config.core_setting import settings


class LedgerSlot(StrEnum):
    TICKET = 'ticket'
    TICKET_COUNT = 'ticket_count'
    OWNER = 'owner'
    TOKEN = 'token'


def _make_key(key: str) -> str:
    """Add prefix to key for test isolation in parallel testing"""
    return f'{settings.KVROCKS_KEY_PREFIX}ticket_ledger:{key}'


def make_ticket_key(*, ticket_id: int) -> str:
    return _make_key(f'{LedgerSlot.TICKET}:{ticket_id}')


def make_ticket_count_key() -> str:
    return _make_key(LedgerSlot.TICKET_COUNT)


def make_owner_key() -> str:
    """Organizer identity slot"""
    return _make_key(LedgerSlot.OWNER)


def make_token_key() -> str:
    """Payment-asset identity slot"""
    return _make_key(LedgerSlot.TOKEN)
