from sqlalchemy import Column, Integer, String
from app.models.user import Base


class TelegramChannel(Base):
    __tablename__ = "telegram_channels"
    id = Column(Integer, primary_key=True, index=True)
    image_url = Column(String(500), nullable=False)
    link_url = Column(String(500), nullable=False)
    name_ar = Column(String(255))
    name_en = Column(String(255))
    order = Column(Integer, default=0, nullable=False)
