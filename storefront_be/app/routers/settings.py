from fastapi import APIRouter, Depends, HTTPException
from typing import List, Optional

from app.config import get_settings
from app.schemas.site_setting import SiteSettingIn, SiteSettingOut
from app.storage import DatabaseStorage, get_storage
from app.utils.security import current_admin_claims


router = APIRouter()


def settings_write_gate(claims: Optional[dict] = Depends(current_admin_claims)) -> None:
    """Admin gate for setting writes; SETTINGS_REQUIRE_ADMIN=0 reopens them to anyone."""
    if get_settings().SETTINGS_REQUIRE_ADMIN and not claims:
        raise HTTPException(status_code=401, detail="Unauthorized")


@router.get("", response_model=List[SiteSettingOut])
def get_site_settings(storage: DatabaseStorage = Depends(get_storage)):
    return storage.get_settings()


@router.get("/{key}", response_model=SiteSettingOut)
def get_site_setting(key: str, storage: DatabaseStorage = Depends(get_storage)):
    setting = storage.get_setting(key)
    if not setting:
        raise HTTPException(status_code=404, detail="Setting not found")
    return setting


@router.post("", response_model=SiteSettingOut, status_code=201, dependencies=[Depends(settings_write_gate)])
def upsert_site_setting(payload: SiteSettingIn, storage: DatabaseStorage = Depends(get_storage)):
    """Write a setting by key: overwrite the value when the key exists, insert it otherwise."""
    return storage.upsert_setting(payload.key, payload.value)
