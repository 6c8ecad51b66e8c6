from sqlalchemy import Column, Integer, String, Boolean, DateTime, Index, CheckConstraint, text
from datetime import datetime
from qrmenu.models.base import Base


class MenuTheme(Base):
    __tablename__ = "menu_themes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    restaurant_name = Column(String, nullable=False)
    button_color = Column(String(7), nullable=False)     # #RRGGBB
    button_shape = Column(String, nullable=False)        # rounded, square, pill
    background_type = Column(String, nullable=False)     # color, image
    background_value = Column(String, nullable=False)    # hex color or image URL
    border_radius = Column(Integer, nullable=False, default=10, server_default="10")
    primary_color = Column(String(7), nullable=False)
    text_color = Column(String(7), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        CheckConstraint("border_radius >= 0 AND border_radius <= 50", name="ck_menu_themes_border_radius"),
        # At most one active theme: unique over the active rows only
        Index(
            "uq_menu_themes_single_active",
            "is_active",
            unique=True,
            postgresql_where=text("is_active"),
            sqlite_where=text("is_active"),
        ),
    )
