# 🌍 ppp_calc/__init__.py
"""
🌍 ppp_calc — ядро калькулятора цін з поправкою на паритет купівельної спроможності.

Публічне API:
    • `load_ppp_data`, `get_countries_from_ppp_data` — датасет і каталог країн;
    • `fetch_exchange_rates`, `get_exchange_rate`, `convert_currency` — курси;
    • `calculate_conversion` — ринкова та PPP-конвертація;
    • `get_currency_to_country_code` — представник країни для валюти;
    • `PPPCalculator` — фасад, що зводить усе разом.
"""

from __future__ import annotations

from ppp_calc.domain.conversion.engine import ConversionOutcome, calculate_conversion
from ppp_calc.domain.countries.reference import get_currency_to_country_code
from ppp_calc.domain.currency.interfaces import ExchangeRateSnapshot, RateSource
from ppp_calc.domain.currency.rates import convert_currency, get_exchange_rate
from ppp_calc.domain.ppp.entities import Country, PPPRecord
from ppp_calc.infrastructure.adapters.calculator_facade import PPPCalculator, build_calculator
from ppp_calc.infrastructure.currency.exchange_rate_provider import fetch_exchange_rates
from ppp_calc.infrastructure.ppp.country_catalog import get_countries_from_ppp_data
from ppp_calc.infrastructure.ppp.ppp_loader import load_ppp_data
from ppp_calc.shared.errors import AppError, ConfigError, DataFormatError, RatesFetchError

__version__ = "0.1.0"

__all__ = [
    "AppError",
    "ConfigError",
    "ConversionOutcome",
    "Country",
    "DataFormatError",
    "ExchangeRateSnapshot",
    "PPPCalculator",
    "PPPRecord",
    "RateSource",
    "RatesFetchError",
    "build_calculator",
    "calculate_conversion",
    "convert_currency",
    "fetch_exchange_rates",
    "get_countries_from_ppp_data",
    "get_currency_to_country_code",
    "get_exchange_rate",
    "load_ppp_data",
]
