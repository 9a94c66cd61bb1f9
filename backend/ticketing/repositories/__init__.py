from ticketing.repositories.tenant_repository import TenantRepository
from ticketing.repositories.user_repository import UserRepository
from ticketing.repositories.venue_repository import VenueRepository
from ticketing.repositories.act_repository import ActRepository
from ticketing.repositories.show_repository import ShowRepository
from ticketing.repositories.ticket_offer_repository import TicketOfferRepository
from ticketing.repositories.ticket_sale_repository import TicketSaleRepository

__all__ = [
    "TenantRepository", "UserRepository", "VenueRepository",
    "ActRepository", "ShowRepository", "TicketOfferRepository",
    "TicketSaleRepository",
]
