"""
🧪 PPPDataLoader: локальний файл, http(s)-джерело через MockTransport, помилки.
"""

import httpx
import pytest

from ppp_calc.config.config_service import ConfigService
from ppp_calc.infrastructure.ppp.ppp_loader import PPPDataLoader, load_ppp_data
from ppp_calc.shared.errors import ConfigError, DataFormatError

DATASET_URL = "https://data.example.org/ppp.csv"


def _client_for(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_loads_local_file(ppp_csv_file):
    loader = PPPDataLoader(str(ppp_csv_file))
    data = await loader.load_ppp_data()

    assert data["DEU"].ppp_factor == pytest.approx(0.74)
    assert loader.reference_year == "2024"


@pytest.mark.asyncio
async def test_loads_file_with_bom(tmp_path, ppp_csv_text):
    path = tmp_path / "bom.csv"
    path.write_text(ppp_csv_text, encoding="utf-8-sig")

    data = await PPPDataLoader(str(path)).load_ppp_data()
    assert "USA" in data


@pytest.mark.asyncio
async def test_missing_file_raises_data_format_error(tmp_path):
    with pytest.raises(DataFormatError) as exc:
        await PPPDataLoader(str(tmp_path / "nope.csv")).load_ppp_data()
    assert exc.value.message == "PPP dataset not found"


@pytest.mark.asyncio
async def test_loads_from_url(ppp_csv_text):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, text=ppp_csv_text)

    async with _client_for(handler) as client:
        data = await PPPDataLoader(DATASET_URL, client=client).load_ppp_data()

    assert seen == [DATASET_URL]
    assert data["IND"].ppp_factor == pytest.approx(22.9)


@pytest.mark.asyncio
async def test_http_error_status_raises_data_format_error():
    async with _client_for(lambda request: httpx.Response(404)) as client:
        with pytest.raises(DataFormatError) as exc:
            await PPPDataLoader(DATASET_URL, client=client).load_ppp_data()

    assert exc.value.details == "HTTP 404"
    assert exc.value.source == DATASET_URL


@pytest.mark.asyncio
async def test_network_error_raises_data_format_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    async with _client_for(handler) as client:
        with pytest.raises(DataFormatError):
            await PPPDataLoader(DATASET_URL, client=client).load_ppp_data()


@pytest.mark.asyncio
async def test_missing_year_column_propagates(ppp_csv_file):
    with pytest.raises(DataFormatError) as exc:
        await PPPDataLoader(str(ppp_csv_file), reference_year="2030").load_ppp_data()
    assert "2030" in exc.value.message


def test_empty_source_is_a_config_error():
    with pytest.raises(ConfigError):
        PPPDataLoader("")


def test_from_config_reads_ppp_section(ppp_csv_file):
    config = ConfigService.from_dict({"ppp_data.source": str(ppp_csv_file), "ppp_data.reference_year": 2023})
    loader = PPPDataLoader.from_config(config)

    assert loader.source == str(ppp_csv_file)
    assert loader.reference_year == "2023"


@pytest.mark.asyncio
async def test_module_helper_uses_environment(monkeypatch, ppp_csv_file):
    monkeypatch.setenv("PPP_DATA_SOURCE", str(ppp_csv_file))
    monkeypatch.setenv("PPP_REFERENCE_YEAR", "2023")

    data = await load_ppp_data()

    assert data["GBR"].ppp_factor == pytest.approx(0.68)


@pytest.mark.asyncio
async def test_module_helper_with_explicit_source(ppp_csv_file):
    data = await load_ppp_data(str(ppp_csv_file))
    assert data["GBR"].year == 2024


def test_default_config_has_no_dataset_source():
    assert ConfigService().get("ppp_data.source") is None

    with pytest.raises(ConfigError) as exc:
        PPPDataLoader.from_config(ConfigService())
    assert "PPP_DATA_SOURCE" in exc.value.message


@pytest.mark.asyncio
async def test_module_helper_without_source_is_a_config_error():
    with pytest.raises(ConfigError):
        await load_ppp_data()
