# 🗂️ ppp_calc/infrastructure/ppp/country_catalog.py
"""
🗂️ Каталог країн для вибору: PPP-датасет ⨝ довідник валют.

🔹 Країни без відомої валюти відкидаються (без плейсхолдерів).
🔹 Назва валюти — з довідника, інакше сам код; прапор і регіон — опційні.
🔹 Сортування за назвою, locale-aware: акценти не відокремлюють країну від
    її неакцентованих сусідів («Åland» поруч з «Aland»).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування join-у
import unicodedata                                                  # 🔤 Нормалізація для сортування
from typing import List, Mapping, Optional, Tuple                   # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from ppp_calc.config.config_service import ConfigService
from ppp_calc.domain.countries.reference import (
    get_currency_code,
    get_currency_name,
    get_flag,
    get_region,
)
from ppp_calc.domain.ppp.entities import Country, PPPRecord
from ppp_calc.infrastructure.ppp.ppp_loader import PPPDataLoader
from ppp_calc.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.infrastructure.ppp.catalog")


def collation_key(name: str) -> Tuple[str, str]:
    """
    Ключ сортування назв: без діакритики та регістру, потім сирий рядок
    (детермінований порядок для однакових згорнутих назв).
    """
    decomposed = unicodedata.normalize("NFKD", name)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return folded, name


def build_country(record: PPPRecord) -> Optional[Country]:
    """Join одного запису з довідником; None — валюта невідома."""
    currency_code = get_currency_code(record.country_code)
    if not currency_code:
        return None
    return Country(
        name=record.country_name,
        code=record.country_code,
        currency=get_currency_name(currency_code),
        currency_code=currency_code,
        flag=get_flag(record.country_code),
        region=get_region(record.country_code),
    )


def build_country_catalog(records: Mapping[str, PPPRecord]) -> List[Country]:
    """Будує відсортований каталог з результату завантажувача."""
    countries: List[Country] = []
    dropped: List[str] = []
    for code, record in records.items():
        country = build_country(record)
        if country is None:
            dropped.append(code)
            continue
        countries.append(country)

    if dropped:
        logger.debug("🔹 Без валюти (відкинуто %d): %s", len(dropped), ", ".join(dropped))
    countries.sort(key=lambda c: collation_key(c.name))
    logger.info("🗂️ Каталог країн: %d записів", len(countries))
    return countries


class CountryCatalogBuilder:
    """🗂️ Завантажує датасет через `PPPDataLoader` і будує каталог."""

    def __init__(self, loader: PPPDataLoader) -> None:
        self._loader = loader

    async def get_countries_from_ppp_data(self) -> List[Country]:
        """
        Raises:
            DataFormatError: з завантажувача, без змін.
        """
        records = await self._loader.load_ppp_data()
        return build_country_catalog(records)


async def get_countries_from_ppp_data(loader: Optional[PPPDataLoader] = None) -> List[Country]:
    """Зручна обгортка над `CountryCatalogBuilder` (loader — з конфігурації за замовчуванням)."""
    if loader is None:
        loader = PPPDataLoader.from_config(ConfigService())
    return await CountryCatalogBuilder(loader).get_countries_from_ppp_data()


__all__ = [
    "collation_key",
    "build_country",
    "build_country_catalog",
    "CountryCatalogBuilder",
    "get_countries_from_ppp_data",
]
