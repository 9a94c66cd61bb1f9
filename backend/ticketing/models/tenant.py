"""
Tenant model. Every venue, act and user belongs to exactly one tenant.
"""

from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.orm import relationship

from ticketing.db.base import Base, TimestampMixin


class Tenant(Base, TimestampMixin):
    __tablename__ = "tenants"

    id = Column(Integer, primary_key=True, index=True)
    tenant_identifier = Column(String(100), unique=True, nullable=False)
    name = Column(String(200), nullable=False)
    slug = Column(String(100), unique=True, index=True, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    users = relationship("User", back_populates="tenant", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, slug={self.slug})>"
