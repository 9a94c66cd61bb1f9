from ticketing.models.tenant import Tenant
from ticketing.models.user import User
from ticketing.models.venue import Venue
from ticketing.models.act import Act
from ticketing.models.show import Show
from ticketing.models.ticket_offer import TicketOffer
from ticketing.models.ticket_sale import TicketSale

__all__ = ["Tenant", "User", "Venue", "Act", "Show", "TicketOffer", "TicketSale"]
