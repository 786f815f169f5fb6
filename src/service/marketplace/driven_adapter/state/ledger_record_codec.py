import attrs
import orjson

from src.service.marketplace.domain.entity.ticket_entity import Ticket


def encode_ticket(ticket: Ticket) -> bytes:
    record = attrs.asdict(ticket)
    # orjson only serializes 64-bit integers; prices span i128
    record['price'] = str(ticket.price)
    return orjson.dumps(record)


def decode_ticket(raw: bytes | str) -> Ticket:
    record = orjson.loads(raw)
    record['price'] = int(record['price'])
    return Ticket(**record)


def encode_identity(identity: str) -> bytes:
    return orjson.dumps(identity)


def decode_identity(raw: bytes | str) -> str:
    return str(orjson.loads(raw))


def encode_count(count: int) -> bytes:
    return orjson.dumps(count)


def decode_count(raw: bytes | str) -> int:
    return int(orjson.loads(raw))
