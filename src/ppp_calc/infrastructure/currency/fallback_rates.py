# 🛟 ppp_calc/infrastructure/currency/fallback_rates.py
"""
🛟 Статична таблиця курсів (база USD) для роботи без мережі та без кешу.

Значення приблизні; таблиця лише гарантує, що калькулятор завжди має
придатний знімок курсів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from types import MappingProxyType                                  # 🧊 Незмінна таблиця
from typing import Mapping                                          # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from ppp_calc.domain.currency.interfaces import (
    STATIC_FALLBACK_LABEL,
    ExchangeRateSnapshot,
    RateSource,
)

FALLBACK_BASE = "USD"

FALLBACK_RATES: Mapping[str, float] = MappingProxyType({
    # 🌍 Основні валюти
    "USD": 1.0, "GBP": 0.79, "EUR": 0.92, "JPY": 149.0, "CAD": 1.36,
    "AUD": 1.53, "INR": 83.0, "CNY": 7.24, "CHF": 0.88, "NOK": 10.5,
    "SEK": 10.3, "DKK": 6.9, "PLN": 4.0, "TRY": 32.0, "RUB": 92.0,
    "BRL": 5.0, "MXN": 17.0, "ZAR": 18.5, "KRW": 1320.0, "SGD": 1.34,
    "HKD": 7.8, "NZD": 1.63,
    # 🌏 Азія
    "IDR": 15700.0, "THB": 35.0, "MYR": 4.7, "PHP": 56.0, "BDT": 110.0,
    "PKR": 278.0, "VND": 24500.0, "LKR": 325.0, "NPR": 132.0, "MMK": 2100.0,
    "KHR": 4100.0, "LAK": 20500.0, "MVR": 15.4, "BND": 1.34, "MNT": 3400.0,
    "AFN": 70.0, "BTN": 83.0, "MOP": 8.05,
    # 🇪🇺 Європа та Центральна Азія
    "ISK": 137.0, "CZK": 23.0, "HUF": 360.0, "RON": 4.6, "HRK": 7.0,
    "BGN": 1.8, "BYN": 3.25, "MDL": 17.8, "GEL": 2.65, "AMD": 390.0,
    "AZN": 1.7, "KZT": 450.0, "KGS": 88.0, "TJS": 10.9, "TMT": 3.5,
    "UZS": 12500.0, "UAH": 41.0, "MKD": 56.5, "RSD": 108.0, "BAM": 1.8,
    "ALL": 93.0,
    # 🕌 Близький Схід і Північна Африка
    "EGP": 48.5, "ILS": 3.7, "AED": 3.67, "SAR": 3.75, "QAR": 3.64,
    "KWD": 0.31, "OMR": 0.38, "BHD": 0.38, "JOD": 0.71, "LBP": 89500.0,
    "MAD": 10.0, "TND": 3.1, "DZD": 135.0, "IRR": 42000.0, "IQD": 1310.0,
    "SYP": 13000.0, "YER": 250.0, "LYD": 4.8,
    # 🌍 Африка на південь від Сахари
    "NGN": 1400.0, "AOA": 900.0, "XOF": 605.0, "XAF": 605.0, "GHS": 15.0,
    "KES": 130.0, "UGX": 3700.0, "TZS": 2600.0, "ETB": 120.0, "ZMW": 27.0,
    "MWK": 1730.0, "RWF": 1360.0, "BIF": 2850.0, "MGA": 4500.0, "MUR": 46.0,
    "SCR": 14.0, "CVE": 102.0, "GMD": 70.0, "SLL": 22000.0, "SLE": 22.0,
    "LRD": 190.0, "DJF": 178.0, "SOS": 570.0, "SDG": 600.0, "SSP": 130.0,
    "ERN": 15.0, "MZN": 64.0, "BWP": 13.5, "NAD": 18.5, "SZL": 18.5,
    "LSL": 18.5, "ZWL": 322.0, "STN": 24.0, "KMF": 455.0, "GNF": 8600.0,
    "CDF": 2800.0, "MRU": 39.5,
    # 🌎 Америка
    "ARS": 990.0, "CLP": 950.0, "COP": 4050.0, "PEN": 3.8, "XCD": 2.7,
    "TTD": 6.8, "JMD": 155.0, "BBD": 2.0, "BSD": 1.0, "BZD": 2.0,
    "GYD": 209.0, "SRD": 35.5, "HTG": 132.0, "DOP": 59.0, "CRC": 520.0,
    "GTQ": 7.8, "HNL": 24.8, "NIO": 36.8, "PAB": 1.0, "PYG": 7350.0,
    "UYU": 42.0, "BOB": 6.9, "VES": 36.5, "BMD": 1.0, "AWG": 1.79,
    "ANG": 1.79, "KYD": 0.83,
    # 🏝️ Океанія
    "PGK": 3.9, "WST": 2.8, "TOP": 2.4, "FJD": 2.3, "VUV": 119.0,
    "SBD": 8.5,
})


def static_fallback_snapshot(now: float) -> ExchangeRateSnapshot:
    """Знімок зі статичної таблиці; завжди позначений як протермінований."""
    return ExchangeRateSnapshot(
        base=FALLBACK_BASE,
        rates=FALLBACK_RATES,
        timestamp=now,
        last_updated=STATIC_FALLBACK_LABEL,
        source=RateSource.STATIC_FALLBACK,
        is_stale=True,
    )


__all__ = ["FALLBACK_BASE", "FALLBACK_RATES", "static_fallback_snapshot"]
