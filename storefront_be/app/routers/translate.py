from fastapi import APIRouter

from app.schemas.translate import TranslateRequest, TranslateResponse
from app.utils.translation import translate_texts


router = APIRouter()


@router.post("", response_model=TranslateResponse)
def translate(payload: TranslateRequest):
    """Positional lookup: each text maps to its known English form or comes back unchanged."""
    return TranslateResponse(translations=translate_texts(payload.texts))
