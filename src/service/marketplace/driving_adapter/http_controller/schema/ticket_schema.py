from typing import List

from pydantic import BaseModel, Field

from src.service.marketplace.domain.entity.registry_entity import U32_MAX


class InitializeMarketplaceRequest(BaseModel):
    organizer: str = Field(min_length=1)
    token: str = Field(min_length=1)

    model_config = {
        'json_schema_extra': {
            'example': {'organizer': 'organizer-1', 'token': 'usdc'},
        }
    }


class MarketplaceResponse(BaseModel):
    organizer: str
    token: str
    ticket_count: int


class MintTicketRequest(BaseModel):
    event_id: int = Field(ge=0, le=U32_MAX)
    price: int  # Negative prices reach the ledger and are rejected there

    model_config = {
        'json_schema_extra': {
            'example': {'event_id': 42, 'price': 1_000_000},
        }
    }


class ListTicketRequest(BaseModel):
    new_price: int

    model_config = {
        'json_schema_extra': {
            'example': {'new_price': 2_000_000},
        }
    }


class PurchaseTicketRequest(BaseModel):
    buyer: str = Field(min_length=1)


class TicketResponse(BaseModel):
    id: int
    event_id: int
    owner: str
    price: int
    for_sale: bool
    is_resale: bool

    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 0,
                'event_id': 42,
                'owner': 'organizer-1',
                'price': 1_000_000,
                'for_sale': False,
                'is_resale': False,
            }
        }
    }


class TicketOwnerResponse(BaseModel):
    ticket_id: int
    owner: str


class TicketListResponse(BaseModel):
    tickets: List[TicketResponse]
