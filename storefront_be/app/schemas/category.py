from typing import ClassVar, FrozenSet, Optional

from pydantic import ConfigDict, Field

from app.schemas.base import CreateModel, PartialUpdate


class CategoryCreate(CreateModel):
    name_ar: str = Field(min_length=1)
    name_en: Optional[str] = None
    order: int = 0


class CategoryUpdate(PartialUpdate):
    required_fields: ClassVar[FrozenSet[str]] = frozenset({"name_ar", "order"})

    name_ar: Optional[str] = Field(None, min_length=1)
    name_en: Optional[str] = None
    order: Optional[int] = None


class CategoryOut(CategoryCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)
