# 📦 ppp_calc/domain/ppp/entities.py
"""
📦 Іммʼютабельні сутності PPP-датасету та каталогу країн.

🔹 `PPPRecord` — один прийнятий рядок CSV для референсного року.
🔹 `Country` — запис каталогу після join із довідником валют (currency_code завжди непорожній).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування валідації
import math                                                         # 🔢 Перевірка скінченності
from dataclasses import dataclass                                   # 🧱 Опис сутностей
from typing import Optional                                         # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from ppp_calc.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.ppp")


@dataclass(frozen=True, slots=True)
class PPPRecord:
    """Рядок датасету: країна, alpha-3 код, PPP-фактор за референсний рік."""

    country_name: str
    country_code: str
    ppp_factor: Optional[float]
    year: int

    @property
    def has_factor(self) -> bool:
        """True, якщо фактор придатний для розрахунку (скінченний і додатний)."""
        return self.ppp_factor is not None and math.isfinite(self.ppp_factor) and self.ppp_factor > 0


@dataclass(frozen=True, slots=True)
class Country:
    """
    Запис каталогу країн для вибору користувачем.

    `currency` — назва валюти для відображення, `currency_code` — ISO 4217.
    """

    name: str
    code: str
    currency: str
    currency_code: str
    flag: Optional[str] = None
    region: Optional[str] = None

    def __post_init__(self) -> None:
        if not (self.currency_code or "").strip():
            logger.error("❌ Country %s без коду валюти", self.code)
            raise ValueError(f"Country {self.code!r} must have a currency code")

    @property
    def label(self) -> str:
        """Підпис для списків вибору: «🇩🇪 Germany (EUR)»."""
        prefix = f"{self.flag} " if self.flag else ""
        return f"{prefix}{self.name} ({self.currency_code})"


__all__ = ["PPPRecord", "Country"]
