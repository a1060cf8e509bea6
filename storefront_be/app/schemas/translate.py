from pydantic import BaseModel
from typing import List, Optional


class TranslateRequest(BaseModel):
    texts: List[Optional[str]]


class TranslateResponse(BaseModel):
    translations: List[Optional[str]]
