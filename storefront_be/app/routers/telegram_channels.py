from fastapi import APIRouter, Depends, HTTPException, Response
from typing import List

from app.schemas.telegram_channel import TelegramChannelCreate, TelegramChannelUpdate, TelegramChannelOut
from app.storage import DatabaseStorage, get_storage
from app.utils.security import require_admin


router = APIRouter()


@router.get("", response_model=List[TelegramChannelOut])
def get_telegram_channels(storage: DatabaseStorage = Depends(get_storage)):
    return storage.get_telegram_channels()


@router.get("/{id}", response_model=TelegramChannelOut)
def get_telegram_channel(id: str, storage: DatabaseStorage = Depends(get_storage)):
    channel = storage.get_telegram_channel(id)
    if not channel:
        raise HTTPException(status_code=404, detail="Telegram channel not found")
    return channel


@router.post("", response_model=TelegramChannelOut, status_code=201, dependencies=[Depends(require_admin)])
def create_telegram_channel(payload: TelegramChannelCreate, storage: DatabaseStorage = Depends(get_storage)):
    return storage.create_telegram_channel(payload.model_dump())


@router.patch("/{id}", response_model=TelegramChannelOut, dependencies=[Depends(require_admin)])
def update_telegram_channel(
    id: str,
    payload: TelegramChannelUpdate,
    storage: DatabaseStorage = Depends(get_storage),
):
    channel = storage.update_telegram_channel(id, payload.changes())
    if not channel:
        raise HTTPException(status_code=404, detail="Telegram channel not found")
    return channel


@router.delete("/{id}", status_code=204, dependencies=[Depends(require_admin)])
def delete_telegram_channel(id: str, storage: DatabaseStorage = Depends(get_storage)):
    if not storage.delete_telegram_channel(id):
        raise HTTPException(status_code=404, detail="Telegram channel not found")
    return Response(status_code=204)
