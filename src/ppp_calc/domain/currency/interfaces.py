# 💱 ppp_calc/domain/currency/interfaces.py
"""
💱 Контракти та DTO валютного шару.

🔹 `ExchangeRateSnapshot` — знімок курсів відносно базової валюти + мітки свіжості.
🔹 `RateSource` — звідки взявся знімок (кеш, мережа, протермінований кеш, статичний fallback).
🔹 `RateQuote` — результат пошуку курсу з явною гілкою «курс відсутній».
🔹 `IRatesCache` / `IExchangeRatesProvider` — Protocol-и для DI провайдера курсів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування DTO
import math                                                         # 🔢 Валідація чисел
from dataclasses import dataclass                                   # 🧱 DTO
from enum import Enum                                               # 🔖 Джерело знімка
from types import MappingProxyType                                  # 🧊 Незмінні курси
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

# 🧩 Внутрішні модулі проєкту
from ppp_calc.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.currency")

STATIC_FALLBACK_LABEL = "Static fallback rates"                     # 🏷️ Сентинел у last_updated


class RateSource(str, Enum):
    """🔖 Походження знімка курсів."""

    CACHE = "cache"
    NETWORK = "network"
    STALE_CACHE = "stale_cache"
    STATIC_FALLBACK = "static_fallback"


def _clean_rates(raw: Any) -> Dict[str, float]:
    """Лишає тільки додатні скінченні числові курси з кодами у верхньому регістрі."""
    cleaned: Dict[str, float] = {}
    if not isinstance(raw, Mapping):
        return cleaned
    for code, value in raw.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            logger.debug("🔹 Пропущено нечисловий курс %s=%r", code, value)
            continue
        try:
            rate = float(value)
        except OverflowError:                                       # ціле, більше за float
            logger.debug("🔹 Пропущено завеликий курс %s", code)
            continue
        if not math.isfinite(rate) or rate <= 0:
            logger.debug("🔹 Пропущено невалідний курс %s=%r", code, value)
            continue
        cleaned[str(code).strip().upper()] = rate
    return cleaned


# ================================
# 🏛️ СТРУКТУРИ ДАНИХ (DTO)
# ================================
@dataclass(frozen=True, slots=True)
class ExchangeRateSnapshot:
    """
    Знімок курсів: `rates[code]` — скільки одиниць `code` за 1 одиницю `base`.

    Курс базової валюти концептуально дорівнює 1 (може бути відсутнім у `rates`).
    """

    base: str
    rates: Mapping[str, float]
    timestamp: float
    last_updated: str
    source: RateSource = RateSource.NETWORK
    is_stale: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "base", (self.base or "").strip().upper())
        object.__setattr__(self, "rates", MappingProxyType(_clean_rates(self.rates)))

    @property
    def is_static_fallback(self) -> bool:
        return self.last_updated == STATIC_FALLBACK_LABEL

    def rate_for(self, currency_code: str) -> Optional[float]:
        """Курс валюти відносно базової; для самої базової — 1.0, якщо його не передали."""
        code = (currency_code or "").strip().upper()
        rate = self.rates.get(code)
        if rate is None and code == self.base:
            return 1.0
        return rate

    def age(self, now: float) -> float:
        """Вік знімка в секундах на момент `now`."""
        return now - self.timestamp

    def with_source(self, source: RateSource, *, is_stale: bool = False) -> "ExchangeRateSnapshot":
        """Копія знімка з іншим джерелом (кеш → протермінований кеш тощо)."""
        return ExchangeRateSnapshot(
            base=self.base,
            rates=dict(self.rates),
            timestamp=self.timestamp,
            last_updated=self.last_updated,
            source=source,
            is_stale=is_stale,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Payload для кешу (ключі як у відповіді API)."""
        return {
            "base": self.base,
            "rates": dict(self.rates),
            "timestamp": self.timestamp,
            "lastUpdated": self.last_updated,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, source: RateSource = RateSource.CACHE) -> "ExchangeRateSnapshot":
        """
        Відновлює знімок з кешу.

        Raises:
            ValueError: payload не є обʼєктом з `base`, `rates`, числовим `timestamp`.
        """
        if not isinstance(data, Mapping):
            raise ValueError("Snapshot payload must be an object")
        base = data.get("base")
        rates = data.get("rates")
        timestamp = data.get("timestamp")
        if not isinstance(base, str) or not isinstance(rates, Mapping):
            raise ValueError("Snapshot payload requires 'base' and 'rates'")
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise ValueError("Snapshot payload requires numeric 'timestamp'")
        try:
            stamp = float(timestamp)
        except OverflowError:
            raise ValueError("Snapshot 'timestamp' is out of range") from None
        if not math.isfinite(stamp):
            raise ValueError("Snapshot 'timestamp' must be finite")
        return cls(
            base=base,
            rates=rates,
            timestamp=stamp,
            last_updated=str(data.get("lastUpdated") or ""),
            source=source,
        )


@dataclass(frozen=True, slots=True)
class RateQuote:
    """
    Результат пошуку курсу між двома валютами.

    `found=False` — один із курсів відсутній; тоді `rate` дорівнює 1.0
    (сума лишається без змін).
    """

    rate: float
    found: bool = True

    @classmethod
    def missing(cls) -> "RateQuote":
        return cls(rate=1.0, found=False)


# ================================
# 🔌 КОНТРАКТИ
# ================================
@runtime_checkable
class IRatesCache(Protocol):
    """Локальне сховище одного знімка курсів."""

    async def load(self) -> Optional[ExchangeRateSnapshot]: ...
    async def save(self, snapshot: ExchangeRateSnapshot) -> None: ...


@runtime_checkable
class IExchangeRatesProvider(Protocol):
    """Провайдер курсів: завжди повертає придатний знімок."""

    async def fetch_exchange_rates(self) -> ExchangeRateSnapshot: ...
    async def close(self) -> None: ...


@dataclass(frozen=True, slots=True)
class RatesSettings:
    """Параметри провайдера курсів (читаються з ConfigService)."""

    api_url: str = "https://api.exchangerate-api.com/v4/latest/USD"
    base_currency: str = "USD"
    ttl_sec: float = 3600.0
    timeout_sec: float = 10.0
    retry_attempts: int = 1
    retry_delay_sec: float = 1.0


__all__ = [
    "STATIC_FALLBACK_LABEL",
    "RateSource",
    "ExchangeRateSnapshot",
    "RateQuote",
    "IRatesCache",
    "IExchangeRatesProvider",
    "RatesSettings",
]
