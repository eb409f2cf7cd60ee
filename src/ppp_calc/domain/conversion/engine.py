# 🧮 ppp_calc/domain/conversion/engine.py
"""
🧮 Двійна конвертація ціни: за ринковим курсом і з поправкою на PPP.

🔹 `calculate_conversion` — повертає `ConversionOutcome` або None, якщо бракує даних.
🔹 `ppp_factor_table` — мапа alpha-3 → PPP-фактор з результату завантажувача.
🔹 Округлення не застосовується: форматування — відповідальність UI.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування пропусків
import math                                                         # 🔢 Перевірка скінченності
from dataclasses import dataclass                                   # 🧱 DTO результату
from numbers import Real                                            # 🔢 Дійсні числа
from typing import Dict, Mapping, Optional, Union                   # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from ppp_calc.domain.currency.interfaces import ExchangeRateSnapshot
from ppp_calc.domain.currency.rates import get_exchange_rate
from ppp_calc.domain.ppp.entities import Country, PPPRecord
from ppp_calc.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.conversion")

PPPFactors = Mapping[str, Union[float, PPPRecord, None]]


@dataclass(frozen=True, slots=True)
class ConversionOutcome:
    """Результат двох конвертацій плюс використані вхідні параметри (для аудиту/відображення)."""

    exchange_amount: float
    ppp_amount: float
    currency_code: str
    origin_ppp: float
    target_ppp: float
    conversion_rate: float
    source_amount: float
    source_currency: str

    @property
    def ppp_to_exchange_ratio(self) -> float:
        """Наскільки PPP-сума відрізняється від ринкової (1.0 — однаково)."""
        if self.exchange_amount == 0:
            return 1.0
        return self.ppp_amount / self.exchange_amount


def _usable_number(value: object) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def _factor_for(country: Country, ppp_factors: PPPFactors) -> Optional[float]:
    raw = ppp_factors.get(country.code)
    if isinstance(raw, PPPRecord):
        raw = raw.ppp_factor
    factor = _usable_number(raw)
    if factor is None or factor <= 0:                               # None, 0 або відʼємний → «немає даних»
        return None
    return factor


def ppp_factor_table(records: Mapping[str, PPPRecord]) -> Dict[str, float]:
    """Витягує з результату завантажувача тільки придатні PPP-фактори."""
    return {
        code: float(record.ppp_factor)
        for code, record in records.items()
        if record.has_factor and record.ppp_factor is not None
    }


def calculate_conversion(
    amount: Optional[float],
    origin_country: Optional[Country],
    target_country: Optional[Country],
    ppp_factors: Optional[PPPFactors],
    snapshot: Optional[ExchangeRateSnapshot],
) -> Optional[ConversionOutcome]:
    """
    Рахує ринкову та PPP-конвертацію `amount` з країни-джерела в цільову.

    Returns:
        ConversionOutcome або None, якщо відсутня/некоректна сума, країна,
        знімок курсів або PPP-фактор будь-якої зі сторін (None, 0 чи відʼємний).
    """
    value = _usable_number(amount)
    if value is None or value < 0:
        logger.debug("🔹 Сума відсутня або некоректна: %r", amount)
        return None
    if origin_country is None or target_country is None or snapshot is None or ppp_factors is None:
        logger.debug("🔹 Не всі вхідні дані готові для конвертації")
        return None

    origin_ppp = _factor_for(origin_country, ppp_factors)
    target_ppp = _factor_for(target_country, ppp_factors)
    if origin_ppp is None or target_ppp is None:
        logger.info(
            "ℹ️ Немає PPP-фактора: %s=%s %s=%s",
            origin_country.code,
            origin_ppp,
            target_country.code,
            target_ppp,
        )
        return None

    conversion_rate = get_exchange_rate(origin_country.currency_code, target_country.currency_code, snapshot)
    outcome = ConversionOutcome(
        exchange_amount=value * conversion_rate,
        ppp_amount=value * target_ppp / origin_ppp,
        currency_code=target_country.currency_code,
        origin_ppp=origin_ppp,
        target_ppp=target_ppp,
        conversion_rate=conversion_rate,
        source_amount=value,
        source_currency=origin_country.currency_code,
    )
    logger.debug(
        "✅ %s %s → %s: exchange=%s ppp=%s",
        value,
        origin_country.code,
        target_country.code,
        outcome.exchange_amount,
        outcome.ppp_amount,
    )
    return outcome


__all__ = ["ConversionOutcome", "PPPFactors", "calculate_conversion", "ppp_factor_table"]
