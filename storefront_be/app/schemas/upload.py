from pydantic import ConfigDict

from app.schemas.base import CamelModel


class UploadOut(CamelModel):
    url: str
    filename: str
    original_name: str
    size: int
    mime_type: str

    model_config = ConfigDict(from_attributes=True)
