"""
🧪 ExchangeRateProvider: свіжий кеш → мережа → протермінований кеш → статичні курси.

Мережа підміняється `httpx.MockTransport`, час — фейковим годинником.
"""

import httpx
import pytest

from ppp_calc.config.config_service import ConfigService
from ppp_calc.domain.currency.interfaces import (
    STATIC_FALLBACK_LABEL,
    ExchangeRateSnapshot,
    IExchangeRatesProvider,
    RateSource,
    RatesSettings,
)
from ppp_calc.infrastructure.currency.exchange_rate_provider import ExchangeRateProvider, fetch_exchange_rates
from ppp_calc.infrastructure.currency.fallback_rates import FALLBACK_RATES
from ppp_calc.infrastructure.currency.rates_cache import InMemoryRatesCache, JsonFileRatesCache

API_URL = "https://api.exchangerate-api.com/v4/latest/USD"
NOW = 1_700_000_000.0
API_PAYLOAD = {"base": "USD", "date": "2024-06-02", "rates": {"USD": 1, "GBP": 0.8, "EUR": 0.93}}


# ──────────────────────────────────────────────────────────────────────────────
#                          🔧 Тестові заглушки/фейки
# ──────────────────────────────────────────────────────────────────────────────

class _FakeClock:
    def __init__(self, now: float = NOW):
        self.now = now

    def __call__(self) -> float:
        return self.now


class _Api:
    """Лічильник викликів + відповідь, що задається тестом."""

    def __init__(self, respond):
        self.calls = 0
        self._respond = respond

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls += 1
        return self._respond(request)


def _ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json=API_PAYLOAD)


def _down(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("network unreachable", request=request)


def _must_not_be_called(request: httpx.Request) -> httpx.Response:
    raise AssertionError("network must not be touched")


def _snapshot(timestamp: float, **rates: float) -> ExchangeRateSnapshot:
    return ExchangeRateSnapshot(
        base="USD",
        rates=rates or {"USD": 1.0, "GBP": 0.79},
        timestamp=timestamp,
        last_updated="2024-06-01",
    )


def _provider(api, cache, *, clock=None, retries: int = 1) -> ExchangeRateProvider:
    settings = RatesSettings(api_url=API_URL, retry_attempts=retries, retry_delay_sec=0)
    client = httpx.AsyncClient(transport=httpx.MockTransport(api))
    return ExchangeRateProvider(settings, cache, clock=clock or _FakeClock(), client=client)


# ──────────────────────────────────────────────────────────────────────────────
#                               ♻️ Свіжий кеш
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_fresh_cache_skips_network():
    api = _Api(_must_not_be_called)
    cache = InMemoryRatesCache(_snapshot(NOW - 10))

    snapshot = await _provider(api, cache).fetch_exchange_rates()

    assert api.calls == 0
    assert snapshot.source is RateSource.CACHE
    assert snapshot.is_stale is False
    assert snapshot.rates["GBP"] == 0.79


@pytest.mark.asyncio
async def test_cache_at_ttl_boundary_is_refetched():
    api = _Api(_ok)
    cache = InMemoryRatesCache(_snapshot(NOW - 3600))

    snapshot = await _provider(api, cache).fetch_exchange_rates()

    assert api.calls == 1
    assert snapshot.source is RateSource.NETWORK


# ──────────────────────────────────────────────────────────────────────────────
#                               🌐 Мережа
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_network_success_is_saved_to_cache():
    api = _Api(_ok)
    cache = InMemoryRatesCache()
    clock = _FakeClock()

    snapshot = await _provider(api, cache, clock=clock).fetch_exchange_rates()

    assert snapshot.source is RateSource.NETWORK
    assert snapshot.timestamp == NOW
    assert snapshot.last_updated == "2024-06-02"
    assert snapshot.rates["EUR"] == 0.93
    assert cache.saves == 1

    clock.now += 60                                                    # наступний виклик — з кешу
    again = await _provider(_Api(_must_not_be_called), cache, clock=clock).fetch_exchange_rates()
    assert again.source is RateSource.CACHE


@pytest.mark.asyncio
async def test_missing_date_and_base_use_defaults():
    api = _Api(lambda request: httpx.Response(200, json={"rates": {"GBP": 0.8}}))

    snapshot = await _provider(api, InMemoryRatesCache(), clock=_FakeClock(0.0)).fetch_exchange_rates()

    assert snapshot.base == "USD"
    assert snapshot.last_updated == "1970-01-01"


@pytest.mark.asyncio
async def test_retries_until_success():
    responses = iter([httpx.Response(503), httpx.Response(200, json=API_PAYLOAD)])
    api = _Api(lambda request: next(responses))

    snapshot = await _provider(api, InMemoryRatesCache(), retries=2).fetch_exchange_rates()

    assert api.calls == 2
    assert snapshot.source is RateSource.NETWORK


# ──────────────────────────────────────────────────────────────────────────────
#                               🛟 Деградація
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_network_failure_returns_stale_cache(caplog):
    cache = InMemoryRatesCache(_snapshot(NOW - 7200))

    snapshot = await _provider(_Api(_down), cache).fetch_exchange_rates()

    assert snapshot.source is RateSource.STALE_CACHE
    assert snapshot.is_stale is True
    assert snapshot.rates["GBP"] == 0.79
    assert cache.saves == 0
    assert "протермінований кеш" in caplog.text


@pytest.mark.asyncio
async def test_no_cache_and_no_network_returns_static_rates():
    api = _Api(_down)

    snapshot = await _provider(api, InMemoryRatesCache(), retries=3).fetch_exchange_rates()

    assert api.calls == 3
    assert snapshot.source is RateSource.STATIC_FALLBACK
    assert snapshot.is_stale is True
    assert snapshot.is_static_fallback is True
    assert snapshot.last_updated == STATIC_FALLBACK_LABEL
    assert snapshot.timestamp == NOW
    assert snapshot.base == "USD"
    assert dict(snapshot.rates) == dict(FALLBACK_RATES)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500),
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json=["not", "an", "object"]),
        httpx.Response(200, json={"base": "USD"}),
        httpx.Response(200, json={"base": "USD", "rates": {"GBP": "n/a"}}),
    ],
)
async def test_bad_responses_fall_back(response):
    cache = InMemoryRatesCache(_snapshot(NOW - 7200))

    snapshot = await _provider(_Api(lambda request: response), cache).fetch_exchange_rates()

    assert snapshot.source is RateSource.STALE_CACHE


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "cached, expected",
    [
        (None, RateSource.STATIC_FALLBACK),
        (_snapshot(NOW - 7200), RateSource.STALE_CACHE),
    ],
)
async def test_malformed_api_url_falls_back(cached, expected):
    api = _Api(_must_not_be_called)
    settings = RatesSettings(api_url="http://[::1", retry_attempts=2, retry_delay_sec=0)
    client = httpx.AsyncClient(transport=httpx.MockTransport(api))
    provider = ExchangeRateProvider(settings, InMemoryRatesCache(cached), clock=_FakeClock(), client=client)

    snapshot = await provider.fetch_exchange_rates()

    assert api.calls == 0
    assert snapshot.source is expected
    assert snapshot.is_stale is True
    await client.aclose()


@pytest.mark.asyncio
async def test_cache_from_the_future_is_refetched():
    api = _Api(_ok)
    cache = InMemoryRatesCache(_snapshot(NOW + 600))

    snapshot = await _provider(api, cache).fetch_exchange_rates()

    assert api.calls == 1
    assert snapshot.source is RateSource.NETWORK
    assert snapshot.timestamp == NOW


@pytest.mark.asyncio
async def test_cache_from_the_future_is_stale_when_network_fails():
    cache = InMemoryRatesCache(_snapshot(NOW + 600))

    snapshot = await _provider(_Api(_down), cache).fetch_exchange_rates()

    assert snapshot.source is RateSource.STALE_CACHE
    assert snapshot.is_stale is True


@pytest.mark.asyncio
async def test_cache_file_round_trip_through_provider(tmp_path):
    cache = JsonFileRatesCache(tmp_path / "rates.json")
    clock = _FakeClock()

    await _provider(_Api(_ok), cache, clock=clock).fetch_exchange_rates()
    clock.now += 2 * 3600
    snapshot = await _provider(_Api(_down), cache, clock=clock).fetch_exchange_rates()

    assert snapshot.source is RateSource.STALE_CACHE
    assert snapshot.rates["GBP"] == 0.8


# ──────────────────────────────────────────────────────────────────────────────
#                               ⚙️ Конфіг і життєвий цикл
# ──────────────────────────────────────────────────────────────────────────────

def test_from_config_reads_settings(tmp_path):
    config = ConfigService.from_dict({
        "exchange_api.url": "https://rates.example.org/latest",
        "exchange_api.ttl_sec": 60,
        "exchange_api.retry_attempts": 3,
        "files.rates_cache": str(tmp_path / "r.json"),
    })

    provider = ExchangeRateProvider.from_config(config)

    assert provider.settings.api_url == "https://rates.example.org/latest"
    assert provider.settings.ttl_sec == 60.0
    assert provider.settings.retry_attempts == 3
    assert provider.settings.base_currency == "USD"
    assert isinstance(provider, IExchangeRatesProvider)


@pytest.mark.asyncio
async def test_close_keeps_injected_client_open():
    client = httpx.AsyncClient(transport=httpx.MockTransport(_ok))
    provider = ExchangeRateProvider(RatesSettings(), InMemoryRatesCache(), client=client)

    async with provider:
        pass

    assert client.is_closed is False
    await client.aclose()


@pytest.mark.asyncio
async def test_module_helper_uses_given_provider():
    cache = InMemoryRatesCache(_snapshot(NOW))
    snapshot = await fetch_exchange_rates(_provider(_Api(_must_not_be_called), cache))

    assert snapshot.source is RateSource.CACHE
