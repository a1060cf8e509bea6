from fastapi import APIRouter, Depends, HTTPException, Response
from typing import List

from app.schemas.category import CategoryCreate, CategoryUpdate, CategoryOut
from app.storage import DatabaseStorage, get_storage
from app.utils.security import require_admin


router = APIRouter()


@router.get("", response_model=List[CategoryOut])
def get_categories(storage: DatabaseStorage = Depends(get_storage)):
    return storage.get_categories()


@router.get("/{id}", response_model=CategoryOut)
def get_category(id: str, storage: DatabaseStorage = Depends(get_storage)):
    category = storage.get_category(id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.post("", response_model=CategoryOut, status_code=201, dependencies=[Depends(require_admin)])
def create_category(payload: CategoryCreate, storage: DatabaseStorage = Depends(get_storage)):
    return storage.create_category(payload.model_dump())


@router.patch("/{id}", response_model=CategoryOut, dependencies=[Depends(require_admin)])
def update_category(id: str, payload: CategoryUpdate, storage: DatabaseStorage = Depends(get_storage)):
    category = storage.update_category(id, payload.changes())
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.delete("/{id}", status_code=204, dependencies=[Depends(require_admin)])
def delete_category(id: str, storage: DatabaseStorage = Depends(get_storage)):
    # Products pointing at this category keep their categoryId
    if not storage.delete_category(id):
        raise HTTPException(status_code=404, detail="Category not found")
    return Response(status_code=204)
