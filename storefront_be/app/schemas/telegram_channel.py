from pydantic import ConfigDict, Field
from typing import ClassVar, FrozenSet, Optional

from app.schemas.base import CreateModel, PartialUpdate


class TelegramChannelCreate(CreateModel):
    image_url: str = Field(min_length=1)
    link_url: str = Field(min_length=1)
    name_ar: Optional[str] = None
    name_en: Optional[str] = None
    order: int = 0


class TelegramChannelUpdate(PartialUpdate):
    required_fields: ClassVar[FrozenSet[str]] = frozenset({"image_url", "link_url", "order"})

    image_url: Optional[str] = Field(None, min_length=1)
    link_url: Optional[str] = Field(None, min_length=1)
    name_ar: Optional[str] = None
    name_en: Optional[str] = None
    order: Optional[int] = None


class TelegramChannelOut(TelegramChannelCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)
