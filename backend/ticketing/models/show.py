"""
Show model: one scheduled performance of an act at a venue.

Key design decisions:
- `total_tickets` is fixed when the show is created and never re-derived
  from ticket offers
- Tenant ownership is inherited through the venue
- `version` is bumped by every ticket offer write on the show; the capacity
  ledger uses it as a compare-and-set guard against concurrent writers
"""

from sqlalchemy import Column, Integer, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship

from ticketing.db.base import Base, TimestampMixin


class Show(Base, TimestampMixin):
    __tablename__ = "shows"

    id = Column(Integer, primary_key=True, index=True)
    venue_id = Column(Integer, ForeignKey("venues.id", ondelete="CASCADE"), nullable=False)
    act_id = Column(Integer, ForeignKey("acts.id", ondelete="CASCADE"), nullable=False, index=True)
    start_time = Column(DateTime(timezone=True), nullable=False)
    total_tickets = Column(Integer, nullable=False)

    # Capacity version counter
    version = Column(Integer, nullable=False, default=1)

    venue = relationship("Venue", lazy="joined", innerjoin=True)
    act = relationship("Act", lazy="joined", innerjoin=True)
    ticket_offers = relationship(
        "TicketOffer",
        back_populates="show",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="TicketOffer.created_at",
    )

    __table_args__ = (
        CheckConstraint("total_tickets >= 0", name="check_show_total_tickets_non_negative"),
        # Nearby-shows lookups scan one venue by start time
        Index("ix_shows_venue_start_time", "venue_id", "start_time"),
    )

    def __repr__(self) -> str:
        return f"<Show(id={self.id}, venue={self.venue_id}, act={self.act_id}, total={self.total_tickets})>"
