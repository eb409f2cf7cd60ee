# 🌍 ppp_calc/domain/countries/__init__.py
"""
🌍 Пакет `domain.countries` публікує статичний довідник країн і валют.
"""

from .reference import (
    ALPHA3_TO_ALPHA2,
    COUNTRY_REGIONS,
    COUNTRY_TO_CURRENCY,
    CURRENCY_NAMES,
    REPRESENTATIVE_OVERRIDES,
    get_currency_code,
    get_currency_name,
    get_currency_to_country_code,
    get_flag,
    get_region,
)

__all__ = [
    "ALPHA3_TO_ALPHA2",
    "COUNTRY_REGIONS",
    "COUNTRY_TO_CURRENCY",
    "CURRENCY_NAMES",
    "REPRESENTATIVE_OVERRIDES",
    "get_currency_code",
    "get_currency_name",
    "get_currency_to_country_code",
    "get_flag",
    "get_region",
]
