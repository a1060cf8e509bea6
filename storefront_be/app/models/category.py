from sqlalchemy import Column, Integer, String
from app.models.user import Base


class Category(Base):
    __tablename__ = "categories"
    id = Column(Integer, primary_key=True, index=True)
    name_ar = Column(String(255), nullable=False)
    name_en = Column(String(255))
    order = Column(Integer, default=0, nullable=False)
