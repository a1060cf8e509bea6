from pydantic import ConfigDict, Field
from typing import ClassVar, FrozenSet, Optional

from app.schemas.base import CreateModel, PartialUpdate


class BannerCreate(CreateModel):
    image_url: str = Field(min_length=1)
    link_url: Optional[str] = None
    order: int = 0
    is_active: bool = True


class BannerUpdate(PartialUpdate):
    required_fields: ClassVar[FrozenSet[str]] = frozenset({"image_url", "order", "is_active"})

    image_url: Optional[str] = Field(None, min_length=1)
    link_url: Optional[str] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None


class BannerOut(BannerCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)
