"""Storage façade: every catalog read and write goes through DatabaseStorage.

Each method is a single-table unit of work committed before it returns.
Lists come back ordered by ``order`` ascending with the primary key as the
tie-breaker, so rows sharing an ``order`` keep their insertion order.
"""

import logging
from typing import Any, Dict, List, Optional, Type

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.user import Base, User, get_db
from app.models.category import Category
from app.models.product import Product
from app.models.banner import Banner
from app.models.payment_method import PaymentMethod
from app.models.telegram_channel import TelegramChannel
from app.models.site_setting import SiteSetting

logger = logging.getLogger(__name__)


def parse_id(value) -> Optional[int]:
    """Integer primary key from a path value; None when it cannot be one, so lookups miss."""
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class DatabaseStorage:
    def __init__(self, db: Session):
        self.db = db

    # Shared table operations

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def _list(self, model: Type[Base]) -> list:
        return self.db.query(model).order_by(model.order.asc(), model.id.asc()).all()

    def _get(self, model: Type[Base], id):
        key = parse_id(id)
        if key is None:
            return None
        return self.db.query(model).filter(model.id == key).first()

    def _create(self, model: Type[Base], data: Dict[str, Any]):
        obj = model(**data)
        self.db.add(obj)
        self._commit()
        self.db.refresh(obj)
        return obj

    def _update(self, model: Type[Base], id, data: Dict[str, Any]):
        obj = self._get(model, id)
        if not obj:
            return None
        for field, value in data.items():
            setattr(obj, field, value)
        self._commit()
        self.db.refresh(obj)
        return obj

    def _delete(self, model: Type[Base], id) -> bool:
        obj = self._get(model, id)
        if not obj:
            return False
        self.db.delete(obj)
        self._commit()
        return True

    # Users

    def get_user(self, id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == id).first()

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def create_user(self, data: Dict[str, Any]) -> User:
        user = User(**data)
        self.db.add(user)
        self._commit()
        self.db.refresh(user)
        return user

    # Products

    def get_products(self) -> List[Product]:
        return self._list(Product)

    def get_product(self, id: int) -> Optional[Product]:
        return self._get(Product, id)

    def create_product(self, data: Dict[str, Any]) -> Product:
        return self._create(Product, data)

    def update_product(self, id: int, data: Dict[str, Any]) -> Optional[Product]:
        return self._update(Product, id, data)

    def delete_product(self, id: int) -> bool:
        return self._delete(Product, id)

    # Categories

    def get_categories(self) -> List[Category]:
        return self._list(Category)

    def get_category(self, id: int) -> Optional[Category]:
        return self._get(Category, id)

    def create_category(self, data: Dict[str, Any]) -> Category:
        return self._create(Category, data)

    def update_category(self, id: int, data: Dict[str, Any]) -> Optional[Category]:
        return self._update(Category, id, data)

    def delete_category(self, id: int) -> bool:
        # Products keep their category_id; the link is informational only
        return self._delete(Category, id)

    # Banners

    def get_banners(self) -> List[Banner]:
        return self._list(Banner)

    def get_banner(self, id: int) -> Optional[Banner]:
        return self._get(Banner, id)

    def create_banner(self, data: Dict[str, Any]) -> Banner:
        return self._create(Banner, data)

    def update_banner(self, id: int, data: Dict[str, Any]) -> Optional[Banner]:
        return self._update(Banner, id, data)

    def delete_banner(self, id: int) -> bool:
        return self._delete(Banner, id)

    # Payment methods

    def get_payment_methods(self) -> List[PaymentMethod]:
        return self._list(PaymentMethod)

    def get_payment_method(self, id: int) -> Optional[PaymentMethod]:
        return self._get(PaymentMethod, id)

    def create_payment_method(self, data: Dict[str, Any]) -> PaymentMethod:
        return self._create(PaymentMethod, data)

    def update_payment_method(self, id: int, data: Dict[str, Any]) -> Optional[PaymentMethod]:
        return self._update(PaymentMethod, id, data)

    def delete_payment_method(self, id: int) -> bool:
        return self._delete(PaymentMethod, id)

    # Telegram channels

    def get_telegram_channels(self) -> List[TelegramChannel]:
        return self._list(TelegramChannel)

    def get_telegram_channel(self, id: int) -> Optional[TelegramChannel]:
        return self._get(TelegramChannel, id)

    def create_telegram_channel(self, data: Dict[str, Any]) -> TelegramChannel:
        return self._create(TelegramChannel, data)

    def update_telegram_channel(self, id: int, data: Dict[str, Any]) -> Optional[TelegramChannel]:
        return self._update(TelegramChannel, id, data)

    def delete_telegram_channel(self, id: int) -> bool:
        return self._delete(TelegramChannel, id)

    # Settings

    def get_settings(self) -> List[SiteSetting]:
        return self.db.query(SiteSetting).all()

    def get_setting(self, key: str) -> Optional[SiteSetting]:
        return self.db.query(SiteSetting).filter(SiteSetting.key == key).first()

    def get_setting_value(self, key: str, default: str = "") -> str:
        setting = self.get_setting(key)
        return (setting.value if setting else None) or default

    def upsert_setting(self, key: str, value: Optional[str]) -> SiteSetting:
        setting = self.get_setting(key)
        if setting:
            setting.value = value
        else:
            setting = SiteSetting(key=key, value=value)
            self.db.add(setting)
        self._commit()
        self.db.refresh(setting)
        logger.info("Setting %s upserted", key)
        return setting


def get_storage(db: Session = Depends(get_db)) -> DatabaseStorage:
    return DatabaseStorage(db)
