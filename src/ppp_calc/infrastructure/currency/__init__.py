# 💱 ppp_calc/infrastructure/currency/__init__.py
"""
💱 Інфраструктура курсів валют: провайдер, кеші, статична таблиця.
"""

from __future__ import annotations

from .exchange_rate_provider import ExchangeRateProvider, fetch_exchange_rates
from .fallback_rates import FALLBACK_RATES, static_fallback_snapshot
from .rates_cache import CACHE_KEY, InMemoryRatesCache, JsonFileRatesCache

__all__ = [
    "CACHE_KEY",
    "ExchangeRateProvider",
    "FALLBACK_RATES",
    "InMemoryRatesCache",
    "JsonFileRatesCache",
    "fetch_exchange_rates",
    "static_fallback_snapshot",
]
