from fastapi import APIRouter, Depends, HTTPException, Response
from typing import List

from app.schemas.payment_method import PaymentMethodCreate, PaymentMethodUpdate, PaymentMethodOut
from app.storage import DatabaseStorage, get_storage
from app.utils.security import require_admin


router = APIRouter()


@router.get("", response_model=List[PaymentMethodOut])
def get_payment_methods(storage: DatabaseStorage = Depends(get_storage)):
    return storage.get_payment_methods()


@router.get("/{id}", response_model=PaymentMethodOut)
def get_payment_method(id: str, storage: DatabaseStorage = Depends(get_storage)):
    method = storage.get_payment_method(id)
    if not method:
        raise HTTPException(status_code=404, detail="Payment method not found")
    return method


@router.post("", response_model=PaymentMethodOut, status_code=201, dependencies=[Depends(require_admin)])
def create_payment_method(payload: PaymentMethodCreate, storage: DatabaseStorage = Depends(get_storage)):
    return storage.create_payment_method(payload.model_dump())


@router.patch("/{id}", response_model=PaymentMethodOut, dependencies=[Depends(require_admin)])
def update_payment_method(id: str, payload: PaymentMethodUpdate, storage: DatabaseStorage = Depends(get_storage)):
    method = storage.update_payment_method(id, payload.changes())
    if not method:
        raise HTTPException(status_code=404, detail="Payment method not found")
    return method


@router.delete("/{id}", status_code=204, dependencies=[Depends(require_admin)])
def delete_payment_method(id: str, storage: DatabaseStorage = Depends(get_storage)):
    if not storage.delete_payment_method(id):
        raise HTTPException(status_code=404, detail="Payment method not found")
    return Response(status_code=204)
