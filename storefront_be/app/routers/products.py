from fastapi import APIRouter, Depends, HTTPException, Response
from typing import List

from app.schemas.product import ProductCreate, ProductUpdate, ProductOut
from app.storage import DatabaseStorage, get_storage
from app.utils.security import require_admin

router = APIRouter()


# Admin listing: inactive products are included, the storefront filters them out
@router.get("", response_model=List[ProductOut])
def get_all_products(storage: DatabaseStorage = Depends(get_storage)):
    return storage.get_products()


@router.get("/{id}", response_model=ProductOut)
def get_product_by_id(id: str, storage: DatabaseStorage = Depends(get_storage)):
    product = storage.get_product(id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post("", response_model=ProductOut, status_code=201, dependencies=[Depends(require_admin)])
def create_product(payload: ProductCreate, storage: DatabaseStorage = Depends(get_storage)):
    """Create a product. categoryId is stored as given; it is not checked against categories."""
    return storage.create_product(payload.model_dump())


@router.patch("/{id}", response_model=ProductOut, dependencies=[Depends(require_admin)])
def update_product(id: str, payload: ProductUpdate, storage: DatabaseStorage = Depends(get_storage)):
    product = storage.update_product(id, payload.changes())
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.delete("/{id}", status_code=204, dependencies=[Depends(require_admin)])
def delete_product(id: str, storage: DatabaseStorage = Depends(get_storage)):
    if not storage.delete_product(id):
        raise HTTPException(status_code=404, detail="Product not found")
    return Response(status_code=204)
