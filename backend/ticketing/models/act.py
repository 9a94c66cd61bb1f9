from sqlalchemy import Column, Integer, String, ForeignKey, Index

from ticketing.db.base import Base, TimestampMixin


class Act(Base, TimestampMixin):
    __tablename__ = "acts"

    id = Column(Integer, primary_key=True, index=True)
    tenant_id = Column(Integer, ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(100), nullable=False)

    __table_args__ = (
        Index("ix_acts_tenant_name", "tenant_id", "name"),
    )

    def __repr__(self) -> str:
        return f"<Act(id={self.id}, name={self.name})>"
