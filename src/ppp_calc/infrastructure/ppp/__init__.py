# 📊 ppp_calc/infrastructure/ppp/__init__.py
"""
📊 Інфраструктура PPP-датасету.

🔹 `PPPDataLoader` — асинхронне читання CSV (URL або файл).
🔹 `CountryCatalogBuilder` — каталог країн з join-ом на довідник валют.
"""

from __future__ import annotations

from .country_catalog import (
    CountryCatalogBuilder,
    build_country_catalog,
    get_countries_from_ppp_data,
)
from .csv_parser import parse_csv_line, parse_ppp_csv
from .ppp_loader import PPPDataLoader, load_ppp_data

__all__ = [
    "CountryCatalogBuilder",
    "PPPDataLoader",
    "build_country_catalog",
    "get_countries_from_ppp_data",
    "load_ppp_data",
    "parse_csv_line",
    "parse_ppp_csv",
]
