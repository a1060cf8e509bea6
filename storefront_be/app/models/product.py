from sqlalchemy import Column, Integer, String, Text, Boolean, JSON
from app.models.user import Base


class Product(Base):
    __tablename__ = "products"
    id = Column(Integer, primary_key=True, index=True)
    name_ar = Column(String(255), nullable=False)
    name_en = Column(String(255))
    description_ar = Column(Text)
    description_en = Column(Text)
    # Informational link to categories.id; no foreign key on purpose
    category_id = Column(Integer, index=True, nullable=True)
    image_url = Column(String(500))
    # Optional video URL (uploaded file or external embed)
    video_url = Column(String(500))
    features_ar = Column(JSON)  # ordered list of strings
    features_en = Column(JSON)
    order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
