from pydantic import ConfigDict, Field
from typing import ClassVar, FrozenSet, List, Optional

from app.schemas.base import CreateModel, PartialUpdate


class ProductBase(CreateModel):
    name_ar: str = Field(min_length=1)
    name_en: Optional[str] = None
    description_ar: Optional[str] = None
    description_en: Optional[str] = None
    category_id: Optional[int] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    features_ar: Optional[List[str]] = None
    features_en: Optional[List[str]] = None
    order: int = 0
    is_active: bool = True


class ProductCreate(ProductBase):
    pass


class ProductUpdate(PartialUpdate):
    required_fields: ClassVar[FrozenSet[str]] = frozenset({"name_ar", "order", "is_active"})

    name_ar: Optional[str] = Field(None, min_length=1)
    name_en: Optional[str] = None
    description_ar: Optional[str] = None
    description_en: Optional[str] = None
    category_id: Optional[int] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    features_ar: Optional[List[str]] = None
    features_en: Optional[List[str]] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None


class ProductOut(ProductBase):
    id: int

    # Pydantic v2 config
    model_config = ConfigDict(from_attributes=True)
