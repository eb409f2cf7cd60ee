"""
🧪 test_calculator_flow.py — інтеграційний тест PPPCalculator

Перевіряє:
- Паралельне завантаження датасету та курсів (один виклик завантажувача)
- Конвертацію за кодами країн на завантаженому стані
- Оновлення курсів і поведінку до load()
"""

import asyncio

import httpx
import pytest

from ppp_calc import PPPCalculator, build_calculator
from ppp_calc.config.config_service import ConfigService
from ppp_calc.domain.currency.interfaces import ExchangeRateSnapshot, RateSource
from ppp_calc.infrastructure.ppp.ppp_loader import PPPDataLoader
from ppp_calc.shared.errors import DataFormatError


class _CountingLoader:
    """Обгортка над справжнім loader-ом, що рахує виклики."""

    def __init__(self, inner: PPPDataLoader):
        self._inner = inner
        self.calls = 0
        self.source = inner.source

    async def load_ppp_data(self):
        self.calls += 1
        await asyncio.sleep(0)
        return await self._inner.load_ppp_data()


class _StaticProvider:
    def __init__(self, snapshot: ExchangeRateSnapshot):
        self.snapshot = snapshot
        self.fetches = 0
        self.closed = False

    async def fetch_exchange_rates(self) -> ExchangeRateSnapshot:
        self.fetches += 1
        await asyncio.sleep(0)
        return self.snapshot

    async def close(self) -> None:
        self.closed = True


@pytest.mark.asyncio
async def test_load_and_convert(ppp_csv_file, usd_snapshot):
    loader = _CountingLoader(PPPDataLoader(str(ppp_csv_file)))
    provider = _StaticProvider(usd_snapshot)

    async with PPPCalculator(loader=loader, provider=provider) as calculator:
        state = await calculator.load()
        outcome = calculator.convert(100, "USA", "GBR")

    assert loader.calls == 1
    assert provider.fetches == 1
    assert provider.closed is True
    assert [c.code for c in state.countries] == ["BOL", "DEU", "IND", "GBR", "USA"]
    assert state.ppp_factors["GBR"] == pytest.approx(0.70)
    assert outcome.exchange_amount == pytest.approx(79.0)
    assert outcome.ppp_amount == pytest.approx(70.0)


@pytest.mark.asyncio
async def test_unknown_codes_give_none(ppp_csv_file, usd_snapshot):
    calculator = PPPCalculator(loader=PPPDataLoader(str(ppp_csv_file)), provider=_StaticProvider(usd_snapshot))
    await calculator.load()

    assert calculator.convert(100, "USA", "NRN") is None            # поза каталогом (немає валюти)
    assert calculator.convert(100, "ZZZ", "GBR") is None
    assert calculator.convert(100, "usa", "deu").currency_code == "EUR"


def test_convert_before_load_is_an_error(ppp_csv_file, usd_snapshot):
    calculator = PPPCalculator(loader=PPPDataLoader(str(ppp_csv_file)), provider=_StaticProvider(usd_snapshot))

    assert calculator.is_loaded is False
    with pytest.raises(RuntimeError):
        calculator.convert(1, "USA", "GBR")


@pytest.mark.asyncio
async def test_dataset_errors_propagate(tmp_path, usd_snapshot):
    calculator = PPPCalculator(
        loader=PPPDataLoader(str(tmp_path / "missing.csv")),
        provider=_StaticProvider(usd_snapshot),
    )
    with pytest.raises(DataFormatError):
        await calculator.load()


@pytest.mark.asyncio
async def test_refresh_rates_replaces_snapshot(ppp_csv_file, usd_snapshot):
    provider = _StaticProvider(usd_snapshot)
    calculator = PPPCalculator(loader=PPPDataLoader(str(ppp_csv_file)), provider=provider)
    await calculator.load()

    provider.snapshot = ExchangeRateSnapshot(
        base="USD", rates={"GBP": 0.5}, timestamp=0.0, last_updated="x", source=RateSource.NETWORK
    )
    await calculator.refresh_rates()

    assert calculator.convert(100, "USA", "GBR").exchange_amount == pytest.approx(50.0)
    assert calculator.state.ppp_factors["GBR"] == pytest.approx(0.70)


@pytest.mark.asyncio
async def test_build_calculator_from_config(ppp_csv_file, tmp_path, monkeypatch):
    config = ConfigService.from_dict({
        "ppp_data.source": str(ppp_csv_file),
        "files.rates_cache": str(tmp_path / "rates.json"),
        "exchange_api.retry_attempts": 1,
        "logging.console": False,
    })

    def offline(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline", request=request)

    real_client = httpx.AsyncClient
    monkeypatch.setattr(
        httpx, "AsyncClient", lambda *a, **kw: real_client(*a, transport=httpx.MockTransport(offline), **kw)
    )

    async with build_calculator(config) as calculator:
        state = await calculator.load()

    assert state.rates.source is RateSource.STATIC_FALLBACK
    assert calculator.convert(100, "USA", "DEU").exchange_amount == pytest.approx(92.0)
