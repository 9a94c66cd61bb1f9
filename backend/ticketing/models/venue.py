"""
Venue model. A venue's seating capacity bounds the ticket count of every
show scheduled there.
"""

from sqlalchemy import Column, Integer, Float, String, ForeignKey, CheckConstraint, Index

from ticketing.db.base import Base, TimestampMixin


class Venue(Base, TimestampMixin):
    __tablename__ = "venues"

    id = Column(Integer, primary_key=True, index=True)
    tenant_id = Column(Integer, ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(100), nullable=False)
    address = Column(String(300), nullable=True)
    description = Column(String(2000), nullable=False, default="")
    seating_capacity = Column(Integer, nullable=False)
    # Optional map position; either both are set or neither
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    __table_args__ = (
        CheckConstraint("seating_capacity > 0", name="check_venue_seating_capacity_positive"),
        Index("ix_venues_tenant_name", "tenant_id", "name"),
    )

    def __repr__(self) -> str:
        return f"<Venue(id={self.id}, name={self.name}, capacity={self.seating_capacity})>"
