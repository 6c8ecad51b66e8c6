from sqlalchemy import Column, Integer, String, Boolean, DateTime
from datetime import datetime
from qrmenu.models.base import Base


class QRCode(Base):
    __tablename__ = "qr_codes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    menu_url = Column(String, nullable=False)
    qr_code_url = Column(String, nullable=False)  # derived from menu_url, never client-set
    is_active = Column(Boolean, nullable=False, default=True)
    revision = Column(Integer, nullable=False, default=0, server_default="0")  # bumped on regenerate
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
