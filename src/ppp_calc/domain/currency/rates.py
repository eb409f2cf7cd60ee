# 🧮 ppp_calc/domain/currency/rates.py
"""
🧮 Чиста арифметика над `ExchangeRateSnapshot`.

🔹 `quote_exchange_rate` — множник між валютами з явною ознакою `found`.
🔹 `get_exchange_rate` — той самий множник як число (1.0, якщо курсу немає).
🔹 `convert_currency` — конвертація суми; без курсу сума повертається без змін.

Три гілки: from == base → × rates[to]; to == base → ÷ rates[from];
інакше через базову валюту (÷ rates[from], × rates[to]).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування відсутніх курсів
from typing import Optional, Tuple                                  # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from ppp_calc.domain.currency.interfaces import ExchangeRateSnapshot, RateQuote
from ppp_calc.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.currency.rates")


def _norm(code: Optional[str]) -> str:
    return (code or "").strip().upper()


def _lookup_pair(
    from_ccy: str, to_ccy: str, snapshot: ExchangeRateSnapshot
) -> Optional[Tuple[float, float]]:
    from_rate = snapshot.rate_for(from_ccy)
    to_rate = snapshot.rate_for(to_ccy)
    if not from_rate or not to_rate:
        logger.warning("⚠️ Відсутній курс для %s або %s (base=%s)", from_ccy, to_ccy, snapshot.base)
        return None
    return from_rate, to_rate


def quote_exchange_rate(from_currency: str, to_currency: str, snapshot: ExchangeRateSnapshot) -> RateQuote:
    """
    Повертає множник `from → to` за знімком.

    Returns:
        RateQuote(rate, found=True) або RateQuote.missing() (rate=1.0), якщо
        одна з валют відсутня у знімку.
    """
    from_ccy, to_ccy = _norm(from_currency), _norm(to_currency)
    if from_ccy == to_ccy:
        return RateQuote(rate=1.0)

    pair = _lookup_pair(from_ccy, to_ccy, snapshot)
    if pair is None:
        return RateQuote.missing()
    from_rate, to_rate = pair

    if from_ccy == snapshot.base:
        rate = to_rate
    elif to_ccy == snapshot.base:
        rate = 1 / from_rate
    else:
        rate = to_rate / from_rate
    logger.debug("💱 Курс %s → %s = %s", from_ccy, to_ccy, rate)
    return RateQuote(rate=rate)


def get_exchange_rate(from_currency: str, to_currency: str, snapshot: ExchangeRateSnapshot) -> float:
    """Множник `from → to`; 1.0 для однакових валют або відсутнього курсу."""
    return quote_exchange_rate(from_currency, to_currency, snapshot).rate


def convert_currency(
    amount: float, from_currency: str, to_currency: str, snapshot: ExchangeRateSnapshot
) -> float:
    """
    Конвертує `amount` з `from_currency` у `to_currency`.

    Однакові валюти → сума без змін; відсутній курс → сума без змін (не помилка).
    """
    from_ccy, to_ccy = _norm(from_currency), _norm(to_currency)
    if from_ccy == to_ccy:
        return amount

    pair = _lookup_pair(from_ccy, to_ccy, snapshot)
    if pair is None:
        return amount
    from_rate, to_rate = pair

    if from_ccy == snapshot.base:
        return amount * to_rate
    if to_ccy == snapshot.base:
        return amount / from_rate
    amount_in_base = amount / from_rate
    return amount_in_base * to_rate


__all__ = ["quote_exchange_rate", "get_exchange_rate", "convert_currency"]
