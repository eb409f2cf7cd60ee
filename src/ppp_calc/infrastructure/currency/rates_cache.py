# 💾 ppp_calc/infrastructure/currency/rates_cache.py
"""
💾 Локальні сховища одного знімка курсів (реалізації `IRatesCache`).

🔹 `JsonFileRatesCache` — JSON-документ на диску, знімок під фіксованим ключем.
🔹 `InMemoryRatesCache` — у пам'яті процесу (тести, вбудовування).

Пошкоджений або відсутній файл → `None`; помилки запису лише логуються.
Паралельні записи: виграє останній.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import aiofiles                                                     # 💽 Асинхронна робота з файлами

# 🔠 Системні імпорти
import json                                                         # 📄 Серіалізація кешу
import logging                                                      # 🧾 Логи кешу
from pathlib import Path                                            # 📂 Шлях до файлу
from typing import Any, Dict, Optional, Union                       # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from ppp_calc.domain.currency.interfaces import ExchangeRateSnapshot, RateSource
from ppp_calc.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.infrastructure.currency.cache")

CACHE_KEY = "currency_exchange_rates"


class JsonFileRatesCache:
    """💾 Знімок курсів у JSON-файлі: `{"currency_exchange_rates": {...}}`."""

    def __init__(self, path: Union[str, Path], key: str = CACHE_KEY) -> None:
        self._path = Path(path)
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    async def load(self) -> Optional[ExchangeRateSnapshot]:
        """
        Читає знімок з файлу.

        Повертає None, якщо файлу немає, JSON битий або під ключем
        немає валідного знімка.
        """
        try:
            async with aiofiles.open(self._path, "r", encoding="utf-8") as f:
                content = await f.read()
        except FileNotFoundError:
            logger.debug("📭 Кеш курсів відсутній: %s", self._path)
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("⚠️ Не вдалося прочитати кеш курсів (%s): %s", self._path, e)
            return None

        try:
            document = json.loads(content)
            if not isinstance(document, dict):
                raise ValueError("Очікувався об'єкт (dict) у кеш-файлі курсів.")
            payload = document.get(self._key)
            if payload is None:
                logger.debug("📭 У кеш-файлі немає ключа %s", self._key)
                return None
            snapshot = ExchangeRateSnapshot.from_dict(payload, source=RateSource.CACHE)
        except ValueError as e:
            # json.JSONDecodeError є підкласом ValueError
            logger.warning("⚠️ Кеш курсів пошкоджено (%s): %s", self._path, e)
            return None

        logger.debug("📖 Кеш курсів прочитано: %d валют, ts=%s", len(snapshot.rates), snapshot.timestamp)
        return snapshot

    async def save(self, snapshot: ExchangeRateSnapshot) -> None:
        """Пише знімок у файл; інші ключі документа зберігаються."""
        document = await self._read_document()
        document[self._key] = snapshot.to_dict()
        payload = json.dumps(document, indent=2, ensure_ascii=False)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(self._path, "w", encoding="utf-8") as f:
                await f.write(payload)
            logger.info("💾 Кеш курсів збережено: %s", self._path)
        except OSError as e:
            logger.error("❌ Помилка під час збереження курсів: %s", e)

    async def _read_document(self) -> Dict[str, Any]:
        try:
            async with aiofiles.open(self._path, "r", encoding="utf-8") as f:
                existing = json.loads(await f.read())
        except (OSError, UnicodeDecodeError, ValueError):
            return {}
        return existing if isinstance(existing, dict) else {}


class InMemoryRatesCache:
    """🧠 Кеш курсів у пам'яті процесу."""

    def __init__(self, snapshot: Optional[ExchangeRateSnapshot] = None) -> None:
        self._snapshot = snapshot
        self.saves = 0

    async def load(self) -> Optional[ExchangeRateSnapshot]:
        if self._snapshot is None:
            return None
        return self._snapshot.with_source(RateSource.CACHE)

    async def save(self, snapshot: ExchangeRateSnapshot) -> None:
        self._snapshot = snapshot
        self.saves += 1


__all__ = ["CACHE_KEY", "JsonFileRatesCache", "InMemoryRatesCache"]
