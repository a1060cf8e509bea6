"""Two-language UI labels and the display-language fallback rule."""

from typing import Dict, Optional, Sequence

DEFAULT_LANGUAGE = "ar"
AVAILABLE_LANGUAGES: Dict[str, str] = {
    "ar": "العربية",
    "en": "English",
}

LABELS: Dict[str, Dict[str, str]] = {
    "home": {"ar": "الرئيسية", "en": "Home"},
    "products": {"ar": "المنتجات", "en": "Products"},
    "about": {"ar": "من نحن", "en": "About Us"},
    "contact": {"ar": "اتصل بنا", "en": "Contact"},
    "search": {"ar": "بحث...", "en": "Search..."},
    "allCategories": {"ar": "جميع الفئات", "en": "All Categories"},
    "paymentMethods": {"ar": "طرق الدفع", "en": "Payment Methods"},
    "telegramChannels": {"ar": "قنوات تيليجرام", "en": "Telegram Channels"},
    "contactUs": {"ar": "تواصل معنا", "en": "Contact Us"},
    "features": {"ar": "المميزات", "en": "Features"},
    "noProducts": {"ar": "لا توجد منتجات", "en": "No products found"},
    "viewProduct": {"ar": "عرض المنتج", "en": "View Product"},
    "backToHome": {"ar": "العودة للرئيسية", "en": "Back to Home"},
    "contactVia": {"ar": "تواصل عبر", "en": "Contact via"},
    "welcomeMessage": {"ar": "مرحباً بكم في متجرنا", "en": "Welcome to our store"},
    "discoverProducts": {"ar": "اكتشف أفضل منتجاتنا", "en": "Discover our best products"},
    "unnamedProduct": {"ar": "منتج بدون اسم", "en": "Unnamed product"},
    "productNotFound": {"ar": "المنتج غير موجود", "en": "Product not found"},
    "aboutUsTitle": {"ar": "من نحن", "en": "About Us"},
    "aboutUsDesc": {
        "ar": "نحن نقدم أفضل المنتجات بأعلى جودة وأفضل الأسعار. هدفنا هو إرضاء عملائنا وتقديم تجربة تسوق مميزة.",
        "en": "We offer the best products with the highest quality and best prices. "
              "Our goal is to satisfy our customers and provide a unique shopping experience.",
    },
}


def normalize_language(language: Optional[str]) -> str:
    code = (language or "").strip().lower()[:2]
    return code if code in AVAILABLE_LANGUAGES else DEFAULT_LANGUAGE


def t(key: str, language: str = DEFAULT_LANGUAGE, fallback: Optional[str] = None) -> str:
    entry = LABELS.get(key)
    if entry:
        return entry[normalize_language(language)]
    return fallback or key


def labels_for(language: str) -> Dict[str, str]:
    lang = normalize_language(language)
    return {key: values[lang] for key, values in LABELS.items()}


def pick(language: str, arabic: Optional[str], english: Optional[str]) -> Optional[str]:
    """Field for the UI language; English falls back to Arabic when empty."""
    if normalize_language(language) == "ar":
        return arabic
    return english or arabic


def pick_list(language: str, arabic: Optional[Sequence[str]], english: Optional[Sequence[str]]) -> list:
    if normalize_language(language) == "ar":
        return list(arabic or [])
    return list(english or arabic or [])
