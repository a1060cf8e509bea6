from sqlalchemy import Column, Integer, String, Text
from app.models.user import Base

# Keys read by the storefront pages
TELEGRAM_USERNAME = "telegramUsername"
WHATSAPP_NUMBER = "whatsappNumber"
ABOUT_US_CONTENT = "aboutUsContent"


class SiteSetting(Base):
    __tablename__ = "site_settings"
    id = Column(Integer, primary_key=True, index=True)
    key = Column(String(100), unique=True, index=True, nullable=False)
    value = Column(Text)
