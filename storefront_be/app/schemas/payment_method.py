from pydantic import ConfigDict, Field
from typing import ClassVar, FrozenSet, Optional

from app.schemas.base import CreateModel, PartialUpdate


class PaymentMethodCreate(CreateModel):
    image_url: str = Field(min_length=1)
    name_ar: Optional[str] = None
    name_en: Optional[str] = None
    order: int = 0


class PaymentMethodUpdate(PartialUpdate):
    required_fields: ClassVar[FrozenSet[str]] = frozenset({"image_url", "order"})

    image_url: Optional[str] = Field(None, min_length=1)
    name_ar: Optional[str] = None
    name_en: Optional[str] = None
    order: Optional[int] = None


class PaymentMethodOut(PaymentMethodCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)
