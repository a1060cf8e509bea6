"""Page logic for the public storefront.

Home, product detail, about and contact views are assembled here from the
storage façade: active-only filtering, category and text search, ascending
``order`` sort and the display-language fallback (English field when present,
otherwise Arabic).
"""

import re
from typing import Iterable, List, Optional

from app.models.banner import Banner
from app.models.category import Category
from app.models.product import Product
from app.models.site_setting import ABOUT_US_CONTENT, TELEGRAM_USERNAME, WHATSAPP_NUMBER
from app.storage import DatabaseStorage
from app.utils.i18n import labels_for, normalize_language, pick, pick_list, t
from app.utils.translation import TranslationMemo, translation_memo


def _sort_key(item) -> int:
    return item.order or 0


def filter_home_products(
    products: Iterable[Product],
    category_id: Optional[int] = None,
    search: Optional[str] = None,
) -> List[Product]:
    """Active products, optionally narrowed to one category and a search term.

    Search is a case-insensitive substring match over the Arabic name and
    Arabic description. The sort is stable, so equal ``order`` values keep
    the incoming sequence.
    """
    filtered = [p for p in products if p.is_active]
    if category_id is not None:
        filtered = [p for p in filtered if p.category_id == category_id]
    query = (search or "").strip().lower()
    if query:
        filtered = [
            p for p in filtered
            if query in (p.name_ar or "").lower() or query in (p.description_ar or "").lower()
        ]
    return sorted(filtered, key=_sort_key)


def active_banners(banners: Iterable[Banner]) -> List[Banner]:
    return sorted((b for b in banners if b.is_active), key=_sort_key)


def telegram_link(username: Optional[str]) -> Optional[str]:
    value = (username or "").strip()
    if not value:
        return None
    if value.startswith("http"):
        return value
    return f"https://t.me/{value.replace('@', '')}"


def whatsapp_link(number: Optional[str]) -> Optional[str]:
    value = (number or "").strip()
    if not value:
        return None
    if value.startswith("http"):
        return value
    digits = re.sub(r"\D", "", value)
    return f"https://wa.me/{digits}" if digits else None


class StorefrontView:
    """Builds language-resolved JSON views for one request."""

    def __init__(self, storage: DatabaseStorage, language: str = "ar",
                 translate: bool = False, memo: Optional[TranslationMemo] = None):
        self.storage = storage
        self.language = normalize_language(language)
        self.translate = translate and self.language == "en"
        self.memo = memo or translation_memo

    def _text(self, arabic: Optional[str], english: Optional[str]) -> Optional[str]:
        value = pick(self.language, arabic, english)
        # Arabic fallback in an English view may still have a static translation
        if self.translate and not english and value:
            return self.memo.translate(value)
        return value

    def _texts(self, arabic, english) -> List[str]:
        values = pick_list(self.language, arabic, english)
        if self.translate and not english:
            return self.memo.translate_many(values)
        return values

    def category(self, c: Category) -> dict:
        return {"id": c.id, "name": self._text(c.name_ar, c.name_en), "order": c.order}

    def product_card(self, p: Product) -> dict:
        return {
            "id": p.id,
            "name": self._text(p.name_ar, p.name_en) or t("unnamedProduct", self.language),
            "imageUrl": p.image_url,
            "categoryId": p.category_id,
            "order": p.order,
        }

    def product_detail(self, p: Product) -> dict:
        card = self.product_card(p)
        card.update({
            "description": self._text(p.description_ar, p.description_en),
            "features": self._texts(p.features_ar, p.features_en),
            "videoUrl": p.video_url,
        })
        return card

    def contact(self) -> dict:
        telegram = self.storage.get_setting_value(TELEGRAM_USERNAME)
        whatsapp = self.storage.get_setting_value(WHATSAPP_NUMBER)
        return {
            "telegramUsername": telegram or None,
            "telegramUrl": telegram_link(telegram),
            "whatsappNumber": whatsapp or None,
            "whatsappUrl": whatsapp_link(whatsapp),
        }

    def home(self, category_id: Optional[int] = None, search: Optional[str] = None) -> dict:
        products = filter_home_products(self.storage.get_products(), category_id, search)
        return {
            "language": self.language,
            "labels": labels_for(self.language),
            "banners": [
                {"id": b.id, "imageUrl": b.image_url, "linkUrl": b.link_url}
                for b in active_banners(self.storage.get_banners())
            ],
            "categories": [self.category(c) for c in self.storage.get_categories()],
            "products": [self.product_card(p) for p in products],
            "paymentMethods": [
                {"id": m.id, "imageUrl": m.image_url, "name": self._text(m.name_ar, m.name_en)}
                for m in self.storage.get_payment_methods()
            ],
            "telegramChannels": [
                {"id": c.id, "imageUrl": c.image_url, "linkUrl": c.link_url,
                 "name": self._text(c.name_ar, c.name_en)}
                for c in self.storage.get_telegram_channels()
            ],
            "contact": self.contact(),
        }

    def product_page(self, product_id: int) -> Optional[dict]:
        product = self.storage.get_product(product_id)
        if not product or not product.is_active:
            return None
        page = self.product_detail(product)
        page["contact"] = self.contact()
        return page

    def about(self) -> dict:
        content = self.storage.get_setting_value(ABOUT_US_CONTENT)
        return {
            "title": t("aboutUsTitle", self.language),
            "content": content or t("aboutUsDesc", self.language),
        }
