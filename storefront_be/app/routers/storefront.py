from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from app.services.storefront import StorefrontView
from app.storage import DatabaseStorage, get_storage
from app.utils.i18n import DEFAULT_LANGUAGE, t


router = APIRouter()


def get_view(
    lang: str = Query(DEFAULT_LANGUAGE),
    translate: bool = Query(False),
    storage: DatabaseStorage = Depends(get_storage),
) -> StorefrontView:
    return StorefrontView(storage, language=lang, translate=translate)


@router.get("/home")
def home_page(
    category_id: Optional[int] = Query(None, alias="categoryId"),
    search: Optional[str] = None,
    view: StorefrontView = Depends(get_view),
):
    return view.home(category_id=category_id, search=search)


@router.get("/products/{id}")
def product_page(id: str, view: StorefrontView = Depends(get_view)):
    page = view.product_page(id)
    if page is None:
        raise HTTPException(status_code=404, detail=t("productNotFound", view.language))
    return page


@router.get("/about")
def about_page(view: StorefrontView = Depends(get_view)):
    return view.about()


@router.get("/contact")
def contact_page(view: StorefrontView = Depends(get_view)):
    return view.contact()
