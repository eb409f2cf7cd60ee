# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Додаємо src у sys.path, щоб працював імпорт "ppp_calc.…" без встановлення пакета
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from ppp_calc.config.config_service import ENV_KEYS, ConfigService  # noqa: E402
from ppp_calc.domain.currency.interfaces import ExchangeRateSnapshot, RateSource  # noqa: E402


SAMPLE_PPP_CSV = (
    "countryName,countryCode,indicatorName,2023,2024\n"
    "United States,USA,PPP conversion factor,1,1\n"
    "United Kingdom,GBR,PPP conversion factor,0.68,0.70\n"
    "Germany,DEU,PPP conversion factor,0.72,0.74\n"
    "India,IND,PPP conversion factor,21.5,22.9\n"
    "\"Bolivia, Plurinational State of\",BOL,PPP conversion factor,2.9,3.1\n"
    "Aruba,ABW,PPP conversion factor,1.3,\n"
    "Narnia,NRN,PPP conversion factor,5,5\n"
)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Кожен тест бачить лише дефолти config.yaml (без .env та змінних оточення)."""
    for env_name in ENV_KEYS:
        monkeypatch.delenv(env_name, raising=False)
    monkeypatch.setattr("ppp_calc.config.config_service.load_dotenv", lambda *a, **k: False)
    ConfigService.reset()
    yield
    ConfigService.reset()


@pytest.fixture
def ppp_csv_text() -> str:
    return SAMPLE_PPP_CSV


@pytest.fixture
def ppp_csv_file(tmp_path, ppp_csv_text) -> Path:
    path = tmp_path / "ppp.csv"
    path.write_text(ppp_csv_text, encoding="utf-8")
    return path


@pytest.fixture
def usd_snapshot() -> ExchangeRateSnapshot:
    return ExchangeRateSnapshot(
        base="USD",
        rates={"USD": 1.0, "GBP": 0.79, "EUR": 0.92, "INR": 83.0, "BOB": 6.9},
        timestamp=1_700_000_000.0,
        last_updated="2024-06-01",
        source=RateSource.NETWORK,
    )
