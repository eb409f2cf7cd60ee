"""
🧪 test_config_service.py — unit-тести для ConfigService

Перевіряє:
- Дефолти з config.yaml
- Перекриття змінними оточення
- Singleton та ізольовані екземпляри from_dict()
"""

import pytest

from ppp_calc.config.config_service import ConfigService


def test_defaults_from_yaml():
    service = ConfigService()

    assert service.get("exchange_api.url") == "https://api.exchangerate-api.com/v4/latest/USD"
    assert service.get("exchange_api.ttl_sec") == 3600
    assert service.get("ppp_data.reference_year") == "2024"
    assert service.get("files.rates_cache") == "cache/exchange_rates.json"


def test_missing_key_returns_default():
    service = ConfigService()

    assert service.get("nope.nothing") is None
    assert service.get("exchange_api.nothing", 42) == 42
    assert service.section("nope") == {}


def test_singleton():
    assert ConfigService() is ConfigService()


@pytest.mark.parametrize(
    "env_name, key, value",
    [
        ("PPP_DATA_SOURCE", "ppp_data.source", "https://data.example.org/ppp.csv"),
        ("PPP_REFERENCE_YEAR", "ppp_data.reference_year", "2023"),
        ("EXCHANGE_API_URL", "exchange_api.url", "https://rates.example.org/latest"),
        ("RATES_CACHE_FILE", "files.rates_cache", "/tmp/rates.json"),
        ("LOG_LEVEL", "logging.level", "DEBUG"),
    ],
)
def test_environment_overrides(monkeypatch, env_name, key, value):
    monkeypatch.setenv(env_name, value)

    service = ConfigService()

    assert service.get(key) == value
    assert service.get("exchange_api.base_currency") == "USD"          # сусідні ключі не зачеплено


def test_from_dict_is_isolated_from_singleton():
    custom = ConfigService.from_dict({"exchange_api.ttl_sec": 5, "logging": {"level": "DEBUG"}})

    assert custom is not ConfigService()
    assert custom.get("exchange_api.ttl_sec") == 5
    assert custom.get("exchange_api.url").startswith("https://")        # дефолти підмішано
    assert custom.section("logging")["level"] == "DEBUG"
    assert ConfigService().get("exchange_api.ttl_sec") == 3600


def test_from_dict_without_defaults():
    custom = ConfigService.from_dict({"ppp_data": {"source": "x.csv"}}, with_defaults=False)

    assert custom.get("ppp_data.source") == "x.csv"
    assert custom.get("exchange_api.url") is None


def test_section_returns_copy():
    service = ConfigService()
    section = service.section("logging")
    section["level"] = "CRITICAL"

    assert service.get("logging.level") == "INFO"
