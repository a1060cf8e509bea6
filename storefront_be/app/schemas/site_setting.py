from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class SiteSettingIn(BaseModel):
    key: str = Field(min_length=1, max_length=100)
    value: Optional[str] = None


class SiteSettingOut(SiteSettingIn):
    id: int

    model_config = ConfigDict(from_attributes=True)
