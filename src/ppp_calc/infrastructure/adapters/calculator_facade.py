# 🧮 ppp_calc/infrastructure/adapters/calculator_facade.py
"""
🧮 PPPCalculator — тонкий фасад над завантажувачем датасету, провайдером курсів
та доменним рушієм конвертації.

🔹 `load()` — паралельно (asyncio.gather) читає датасет і курси; один виклик
    завантажувача живить і каталог країн, і таблицю PPP-факторів.
🔹 `convert()` — конвертація за кодами країн на завантаженому стані.
🔹 `build_calculator()` — фабрика з `ConfigService` (з ініціалізацією логування).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio                                                      # 🔁 Паралельне завантаження
import logging                                                      # 🧾 Логування фасада
from dataclasses import dataclass, field                            # 🧱 Стан калькулятора
from types import MappingProxyType                                  # 🧊 Незмінні мапи
from typing import Mapping, Optional, Tuple                         # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from ppp_calc.config.config_service import ConfigService
from ppp_calc.domain.conversion.engine import ConversionOutcome, calculate_conversion, ppp_factor_table
from ppp_calc.domain.currency.interfaces import ExchangeRateSnapshot, IExchangeRatesProvider
from ppp_calc.domain.ppp.entities import Country
from ppp_calc.infrastructure.currency.exchange_rate_provider import ExchangeRateProvider
from ppp_calc.infrastructure.ppp.country_catalog import build_country_catalog
from ppp_calc.infrastructure.ppp.ppp_loader import PPPDataLoader
from ppp_calc.shared.utils.logger import LOG_NAME, init_logging_from_config

logger = logging.getLogger(f"{LOG_NAME}.adapters.calculator")


# ================================
# 🧱 СТАН КАЛЬКУЛЯТОРА
# ================================
@dataclass(frozen=True, slots=True)
class CalculatorState:
    """Завантажені дані: каталог країн, PPP-фактори та знімок курсів."""

    countries: Tuple[Country, ...]
    ppp_factors: Mapping[str, float]
    rates: ExchangeRateSnapshot
    by_code: Mapping[str, Country] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.by_code:
            object.__setattr__(self, "by_code", MappingProxyType({c.code: c for c in self.countries}))
        object.__setattr__(self, "ppp_factors", MappingProxyType(dict(self.ppp_factors)))

    def country(self, code: str) -> Optional[Country]:
        return self.by_code.get((code or "").strip().upper())


# ================================
# 🧮 ФАСАД
# ================================
class PPPCalculator:
    """🧮 Збирає датасет, курси та рушій конвертації в один обʼєкт."""

    def __init__(
        self,
        config: Optional[ConfigService] = None,
        *,
        loader: Optional[PPPDataLoader] = None,
        provider: Optional[IExchangeRatesProvider] = None,
    ) -> None:
        if loader is None or provider is None:
            config = config or ConfigService()
        self._loader = loader or PPPDataLoader.from_config(config)
        self._provider = provider or ExchangeRateProvider.from_config(config)
        self._state: Optional[CalculatorState] = None
        logger.info("🧮 PPPCalculator init done (source=%s)", getattr(self._loader, "source", "?"))

    @property
    def state(self) -> CalculatorState:
        """Raises RuntimeError, якщо `load()` ще не викликано."""
        if self._state is None:
            raise RuntimeError("PPPCalculator is not loaded; call load() first.")
        return self._state

    @property
    def is_loaded(self) -> bool:
        return self._state is not None

    async def load(self) -> CalculatorState:
        """
        Завантажує датасет і курси паралельно.

        Raises:
            DataFormatError: з завантажувача датасету (курси ніколи не падають).
        """
        records, rates = await asyncio.gather(
            self._loader.load_ppp_data(),
            self._provider.fetch_exchange_rates(),
        )
        countries = build_country_catalog(records)
        self._state = CalculatorState(
            countries=tuple(countries),
            ppp_factors=ppp_factor_table(records),
            rates=rates,
        )
        logger.info(
            "✅ Калькулятор готовий: %d країн, курси=%s%s",
            len(countries), rates.source.value, " (stale)" if rates.is_stale else "",
        )
        return self._state

    async def refresh_rates(self) -> ExchangeRateSnapshot:
        """Оновлює лише знімок курсів (датасет лишається тим самим)."""
        state = self.state
        rates = await self._provider.fetch_exchange_rates()
        self._state = CalculatorState(
            countries=state.countries,
            ppp_factors=state.ppp_factors,
            rates=rates,
            by_code=state.by_code,
        )
        logger.info("🔄 Курси оновлено: %s", rates.source.value)
        return rates

    def convert(self, amount: float, origin_code: str, target_code: str) -> Optional[ConversionOutcome]:
        """
        Конвертує суму між країнами за кодами alpha-3.

        Returns:
            None — невідомий код країни або бракує PPP-факторів.
        """
        state = self.state
        origin = state.country(origin_code)
        target = state.country(target_code)
        if origin is None or target is None:
            logger.debug("🔹 Невідома країна: %s → %s", origin_code, target_code)
            return None
        return calculate_conversion(amount, origin, target, state.ppp_factors, state.rates)

    async def close(self) -> None:
        await self._provider.close()

    async def __aenter__(self) -> "PPPCalculator":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


def build_calculator(config_service: Optional[ConfigService] = None) -> PPPCalculator:
    """🏗️ Фабрика: логування з розділу `logging` + калькулятор з конфігурації."""
    config = config_service or ConfigService()
    init_logging_from_config(config.section("logging"))
    return PPPCalculator(config)


__all__ = ["CalculatorState", "PPPCalculator", "build_calculator"]
