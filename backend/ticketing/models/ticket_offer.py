"""
Ticket offer model: a named, priced slice of a show's capacity.

The sum of `ticket_count` over a show's offers never exceeds
`Show.total_tickets`; that invariant is enforced by the capacity ledger.
The check constraints below are a storage-level backstop for the per-row
rules only.
"""

from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from ticketing.db.base import Base, TimestampMixin


class TicketOffer(Base, TimestampMixin):
    __tablename__ = "ticket_offers"

    id = Column(Integer, primary_key=True, index=True)
    show_id = Column(Integer, ForeignKey("shows.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    ticket_count = Column(Integer, nullable=False)

    show = relationship("Show", back_populates="ticket_offers", lazy="raise")

    __table_args__ = (
        CheckConstraint("price > 0", name="check_ticket_offer_price_positive"),
        CheckConstraint("ticket_count > 0", name="check_ticket_offer_ticket_count_positive"),
    )

    def __repr__(self) -> str:
        return f"<TicketOffer(id={self.id}, show={self.show_id}, name={self.name}, count={self.ticket_count})>"
