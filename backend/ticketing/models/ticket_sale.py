"""
Ticket sale model: a recorded sale of tickets for a show.

Tenant ownership is inherited through the show's venue, the same way
ticket offers are owned.
"""

from sqlalchemy import Column, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from ticketing.db.base import Base, TimestampMixin


class TicketSale(Base, TimestampMixin):
    __tablename__ = "ticket_sales"

    id = Column(Integer, primary_key=True, index=True)
    show_id = Column(Integer, ForeignKey("shows.id", ondelete="CASCADE"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)

    # Responses carry the show's start time, venue and act names
    show = relationship("Show", lazy="joined", innerjoin=True)

    __table_args__ = (
        CheckConstraint("quantity > 0", name="check_ticket_sale_quantity_positive"),
    )

    def __repr__(self) -> str:
        return f"<TicketSale(id={self.id}, show={self.show_id}, quantity={self.quantity})>"
