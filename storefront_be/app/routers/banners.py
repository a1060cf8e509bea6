from fastapi import APIRouter, Depends, HTTPException, Response
from typing import List

from app.schemas.banner import BannerCreate, BannerUpdate, BannerOut
from app.storage import DatabaseStorage, get_storage
from app.utils.security import require_admin


router = APIRouter()


@router.get("", response_model=List[BannerOut])
def get_banners(storage: DatabaseStorage = Depends(get_storage)):
    return storage.get_banners()


@router.get("/{id}", response_model=BannerOut)
def get_banner(id: str, storage: DatabaseStorage = Depends(get_storage)):
    banner = storage.get_banner(id)
    if not banner:
        raise HTTPException(status_code=404, detail="Banner not found")
    return banner


@router.post("", response_model=BannerOut, status_code=201, dependencies=[Depends(require_admin)])
def create_banner(payload: BannerCreate, storage: DatabaseStorage = Depends(get_storage)):
    return storage.create_banner(payload.model_dump())


@router.patch("/{id}", response_model=BannerOut, dependencies=[Depends(require_admin)])
def update_banner(id: str, payload: BannerUpdate, storage: DatabaseStorage = Depends(get_storage)):
    banner = storage.update_banner(id, payload.changes())
    if not banner:
        raise HTTPException(status_code=404, detail="Banner not found")
    return banner


@router.delete("/{id}", status_code=204, dependencies=[Depends(require_admin)])
def delete_banner(id: str, storage: DatabaseStorage = Depends(get_storage)):
    if not storage.delete_banner(id):
        raise HTTPException(status_code=404, detail="Banner not found")
    return Response(status_code=204)
