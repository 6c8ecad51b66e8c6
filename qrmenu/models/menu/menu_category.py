from sqlalchemy import Column, Integer, String, Boolean, Text, DateTime, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from qrmenu.models.base import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    display_order = Column(Integer, nullable=False, default=0, server_default="0")
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    # The RESTRICT foreign key guards deletes; never null out or cascade children
    items = relationship("MenuItem", back_populates="category", passive_deletes="all")

    __table_args__ = (
        Index("idx_categories_active_order", "is_active", "display_order"),
    )
