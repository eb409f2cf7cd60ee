# 💵 ppp_calc/infrastructure/currency/exchange_rate_provider.py
"""
💵 ExchangeRateProvider — отримання курсів валют з кешем, TTL і деградацією.

🎯 Політика `fetch_exchange_rates()`:
    1. свіжий кеш (вік < TTL) → повертаємо без мережі;
    2. інакше GET до API курсів (з повторними спробами), зберігаємо в кеш;
    3. збій мережі/формату → протермінований кеш з позначкою `is_stale`;
    4. кешу немає зовсім → статична таблиця `FALLBACK_RATES`.

⚙️ Нотатки:
    • метод ніколи не піднімає винятків через мережу чи кеш;
    • годинник і HTTP-клієнт інжектуються (детерміновані тести).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                        # 🌐 HTTP-клієнт для API курсів

# 🔠 Системні імпорти
import asyncio                                                      # 💤 Пауза між спробами
import logging                                                      # 🧾 Логи провайдера
import time                                                         # ⏱️ Годинник за замовчуванням
from datetime import datetime, timezone                             # 📅 Дата оновлення
from typing import Any, Callable, Mapping, Optional, cast           # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from ppp_calc.config.config_service import ConfigService
from ppp_calc.domain.currency.interfaces import (
    ExchangeRateSnapshot,
    IRatesCache,
    RateSource,
    RatesSettings,
)
from ppp_calc.infrastructure.currency.fallback_rates import static_fallback_snapshot
from ppp_calc.infrastructure.currency.rates_cache import JsonFileRatesCache
from ppp_calc.shared.errors import RatesFetchError
from ppp_calc.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.infrastructure.currency.provider")

DEFAULT_CACHE_FILE = "cache/exchange_rates.json"


def _today(now: float) -> str:
    return datetime.fromtimestamp(now, tz=timezone.utc).date().isoformat()


class ExchangeRateProvider:
    """
    💵 Провайдер курсів: кеш → мережа → протермінований кеш → статика.
    """

    def __init__(
        self,
        settings: RatesSettings,
        cache: IRatesCache,
        *,
        clock: Callable[[], float] = time.time,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._settings = settings
        self._cache = cache
        self._clock = clock
        self._client = client
        self._owns_client = client is None                           # 🔌 Закриваємо лише власний клієнт
        logger.debug(
            "⚙️ ExchangeRateProvider: url=%s ttl=%ss retries=%s",
            settings.api_url, settings.ttl_sec, settings.retry_attempts,
        )

    @classmethod
    def from_config(
        cls,
        config: ConfigService,
        *,
        cache: Optional[IRatesCache] = None,
        clock: Callable[[], float] = time.time,
        client: Optional[httpx.AsyncClient] = None,
    ) -> "ExchangeRateProvider":
        """🏗️ Створює провайдер з розділів `exchange_api` та `files`."""
        defaults = RatesSettings()
        settings = RatesSettings(
            api_url=config.get("exchange_api.url", defaults.api_url) or defaults.api_url,
            base_currency=config.get("exchange_api.base_currency", defaults.base_currency) or defaults.base_currency,
            ttl_sec=float(config.get("exchange_api.ttl_sec", defaults.ttl_sec)),
            timeout_sec=float(config.get("exchange_api.timeout_sec", defaults.timeout_sec)),
            retry_attempts=cast(int, config.get("exchange_api.retry_attempts", defaults.retry_attempts) or 1),
            retry_delay_sec=float(config.get("exchange_api.retry_delay_sec", defaults.retry_delay_sec) or 0),
        )
        if cache is None:
            cache = JsonFileRatesCache(config.get("files.rates_cache", DEFAULT_CACHE_FILE) or DEFAULT_CACHE_FILE)
        return cls(settings, cache, clock=clock, client=client)

    @property
    def settings(self) -> RatesSettings:
        return self._settings

    # ================================
    # 🔄 ПУБЛІЧНЕ API
    # ================================
    async def fetch_exchange_rates(self) -> ExchangeRateSnapshot:
        """
        🔄 Повертає придатний знімок курсів за політикою кеш → мережа → fallback.
        """
        cached = await self._cache.load()
        now = self._clock()
        # мітка з майбутнього (відʼємний вік) — кеш вважається протермінованим
        if cached is not None and 0 <= cached.age(now) < self._settings.ttl_sec:
            logger.debug("⏱️ Курси свіжі (вік %.0f с). Мережу пропущено.", cached.age(now))
            return cached.with_source(RateSource.CACHE)

        try:
            snapshot = await self._fetch_remote()
        except RatesFetchError as e:
            logger.error("❌ Не вдалося отримати курси: %s", e, extra=e.to_log_extra())
            if cached is not None:
                logger.warning("⚠️ Використовую протермінований кеш курсів (вік %.0f с)", cached.age(now))
                return cached.with_source(RateSource.STALE_CACHE, is_stale=True)
            logger.warning("⚠️ Кешу немає, використовую статичні курси")
            return static_fallback_snapshot(now)

        try:
            await self._cache.save(snapshot)
        except OSError as e:
            logger.error("❌ Не вдалося зберегти курси в кеш: %s", e)
        logger.info("✅ Свіжі курси з API: %d валют (%s)", len(snapshot.rates), snapshot.last_updated)
        return snapshot

    async def close(self) -> None:
        """Закриває HTTP-клієнт, якщо провайдер його створив."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            logger.info("🔌 HTTP-клієнт провайдера курсів закрито.")
        if self._owns_client:
            self._client = None

    async def __aenter__(self) -> "ExchangeRateProvider":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    # ================================
    # 🔒 ВНУТРІШНЯ ЛОГІКА
    # ================================
    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._settings.timeout_sec)
        return self._client

    async def _fetch_remote(self) -> ExchangeRateSnapshot:
        """
        Багатоспробний GET до API курсів.

        Raises:
            RatesFetchError: усі спроби невдалі або відповідь має невалідний формат.
        """
        url = self._settings.api_url
        attempts = max(1, int(self._settings.retry_attempts))
        client = self._get_client()
        last_error: Optional[RatesFetchError] = None

        for attempt in range(attempts):
            try:
                response = await client.get(url)
                response.raise_for_status()
                payload = response.json()
            except httpx.HTTPStatusError as e:
                last_error = RatesFetchError(
                    "Exchange rates API returned an error status",
                    details=f"HTTP {e.response.status_code}",
                    url=url,
                    status_code=e.response.status_code,
                )
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                # InvalidURL не є підкласом HTTPError
                last_error = RatesFetchError("Exchange rates API is unreachable", details=str(e), url=url)
            except ValueError as e:
                # json.JSONDecodeError є підкласом ValueError
                last_error = RatesFetchError("Exchange rates API returned invalid JSON", details=str(e), url=url)
            else:
                return self._build_snapshot(payload)

            logger.error("❌ Спроба %s/%s: %s", attempt + 1, attempts, last_error)
            if attempt < attempts - 1:
                await asyncio.sleep(max(0.0, float(self._settings.retry_delay_sec)))

        raise cast(RatesFetchError, last_error)

    def _build_snapshot(self, payload: Any) -> ExchangeRateSnapshot:
        """Перетворює JSON-відповідь `{base, rates, date?}` на знімок."""
        url = self._settings.api_url
        if not isinstance(payload, Mapping):
            raise RatesFetchError("Malformed exchange rates payload", details="expected an object", url=url)
        rates = payload.get("rates")
        if not isinstance(rates, Mapping):
            raise RatesFetchError("Malformed exchange rates payload", details="missing 'rates' object", url=url)

        now = self._clock()
        base = payload.get("base")
        snapshot = ExchangeRateSnapshot(
            base=base if isinstance(base, str) and base.strip() else self._settings.base_currency,
            rates=rates,
            timestamp=now,
            last_updated=str(payload.get("date") or _today(now)),
            source=RateSource.NETWORK,
        )
        if not snapshot.rates:
            raise RatesFetchError("Malformed exchange rates payload", details="no numeric rates", url=url)
        return snapshot


async def fetch_exchange_rates(provider: Optional[ExchangeRateProvider] = None) -> ExchangeRateSnapshot:
    """
    Зручна обгортка: одноразовий провайдер з `ConfigService` (або переданий).
    """
    if provider is not None:
        return await provider.fetch_exchange_rates()
    async with ExchangeRateProvider.from_config(ConfigService()) as owned:
        return await owned.fetch_exchange_rates()


__all__ = ["ExchangeRateProvider", "fetch_exchange_rates", "DEFAULT_CACHE_FILE"]
