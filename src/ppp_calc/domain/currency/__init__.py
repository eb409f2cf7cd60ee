# 💱 ppp_calc/domain/currency/__init__.py
"""
💱 Пакет `domain.currency` публікує контракти, DTO та чисту арифметику курсів.

🔹 `interfaces.py` — `ExchangeRateSnapshot`, `RateQuote`, `RateSource`, `IRatesCache`,
    `IExchangeRatesProvider`, `RatesSettings`.
🔹 `rates.py` — `quote_exchange_rate`, `get_exchange_rate`, `convert_currency`.
"""

# 🧩 Внутрішні модулі проєкту
from .interfaces import (
    STATIC_FALLBACK_LABEL,       # 🏷️ Сентинел статичного fallback
    ExchangeRateSnapshot,        # 📸 Знімок курсів
    IExchangeRatesProvider,      # 📈 Контракт провайдера курсів
    IRatesCache,                 # 💾 Контракт кешу знімка
    RateQuote,                   # 🧾 Результат пошуку курсу
    RateSource,                  # 🔖 Походження знімка
    RatesSettings,               # ⚙️ Параметри провайдера
)
from .rates import convert_currency, get_exchange_rate, quote_exchange_rate


# ================================
# 📤 ПУБЛІЧНИЙ API ПАКЕТА
# ================================
__all__ = [
    "STATIC_FALLBACK_LABEL",
    "ExchangeRateSnapshot",
    "IExchangeRatesProvider",
    "IRatesCache",
    "RateQuote",
    "RateSource",
    "RatesSettings",
    "convert_currency",
    "get_exchange_rate",
    "quote_exchange_rate",
]
