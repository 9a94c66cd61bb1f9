from ticketing.schemas.user import UserCreate, UserResponse, UserLogin, Token, CurrentUserResponse
from ticketing.schemas.tenant import TenantCreate, TenantResponse
from ticketing.schemas.venue import VenueCreate, VenueUpdate, VenueResponse
from ticketing.schemas.act import ActCreate, ActUpdate, ActResponse, ActCountResponse
from ticketing.schemas.show import ShowCreate, ShowUpdate, ShowResponse, NearbyShow, NearbyShowsResponse
from ticketing.schemas.ticket_offer import (
    TicketOfferCreate, TicketOfferUpdate, TicketOfferPatch, TicketOfferResponse,
    ShowCapacityResponse, CapacityExceededResponse, ErrorResponse,
)
from ticketing.schemas.ticket_sale import TicketSaleCreate, TicketSaleUpdate, TicketSaleResponse

__all__ = [
    "UserCreate", "UserResponse", "UserLogin", "Token", "CurrentUserResponse",
    "TenantCreate", "TenantResponse",
    "VenueCreate", "VenueUpdate", "VenueResponse",
    "ActCreate", "ActUpdate", "ActResponse", "ActCountResponse",
    "ShowCreate", "ShowUpdate", "ShowResponse", "NearbyShow", "NearbyShowsResponse",
    "TicketOfferCreate", "TicketOfferUpdate", "TicketOfferPatch", "TicketOfferResponse",
    "ShowCapacityResponse", "CapacityExceededResponse", "ErrorResponse",
    "TicketSaleCreate", "TicketSaleUpdate", "TicketSaleResponse",
]
