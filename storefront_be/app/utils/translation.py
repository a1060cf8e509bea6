"""Static Arabic to English lookup for catalog text.

This is a data lookup, not a translation engine: the table is a finite
partial mapping loaded from JSON, and any string missing from it comes back
unchanged.
"""

import json
import logging
import threading
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from app.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def load_translations(path: Optional[str] = None) -> Dict[str, str]:
    source = Path(path or get_settings().TRANSLATIONS_FILE)
    with source.open(encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Translation table {source} must be a JSON object")
    table = {str(k): str(v) for k, v in data.items()}
    logger.info("Loaded %d translations from %s", len(table), source)
    return table


def translate_text(text: Optional[str], table: Optional[Dict[str, str]] = None) -> Optional[str]:
    if not text:
        return text
    table = load_translations() if table is None else table
    return table.get(text, text)


def translate_texts(texts: Iterable[Optional[str]], table: Optional[Dict[str, str]] = None) -> List[Optional[str]]:
    table = load_translations() if table is None else table
    return [translate_text(t, table) for t in texts]


class TranslationMemo:
    """Per-string memo in front of the lookup table."""

    def __init__(self, table: Optional[Dict[str, str]] = None):
        self._table = table
        self._cache: Dict[str, str] = {}
        self._lock = threading.Lock()

    def translate(self, text: Optional[str]) -> Optional[str]:
        if not text:
            return text
        cached = self._cache.get(text)
        if cached is not None:
            return cached
        result = translate_text(text, self._table)
        with self._lock:
            self._cache[text] = result
        return result

    def translate_many(self, texts: Iterable[Optional[str]]) -> List[Optional[str]]:
        return [self.translate(t) for t in texts]

    def __contains__(self, text: str) -> bool:
        return text in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()


translation_memo = TranslationMemo()
