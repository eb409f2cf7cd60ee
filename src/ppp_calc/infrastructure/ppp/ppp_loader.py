# 📥 ppp_calc/infrastructure/ppp/ppp_loader.py
"""
📥 PPPDataLoader — асинхронне завантаження CSV-датасету PPP-факторів.

🎯 Призначення:
    • читає датасет з http(s)-URL (httpx) або з локального файлу (aiofiles);
    • делегує парсинг у `parse_ppp_csv`;
    • жорсткі збої (немає ресурсу, формат) піднімає як `DataFormatError`.

⚙️ Нотатки:
    • один fetch на кожен виклик, кешування — відповідальність вищого шару;
    • HTTP-клієнт можна передати ззовні (тоді loader його не закриває).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import aiofiles                                                     # 💽 Асинхронне читання файлу
import httpx                                                        # 🌐 HTTP-клієнт

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логи завантаження
from typing import Dict, Optional, Union                            # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from ppp_calc.config.config_service import ConfigService
from ppp_calc.domain.ppp.entities import PPPRecord
from ppp_calc.infrastructure.ppp.csv_parser import parse_ppp_csv
from ppp_calc.shared.errors import ConfigError, DataFormatError
from ppp_calc.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.infrastructure.ppp.loader")

DEFAULT_REFERENCE_YEAR = "2024"
DEFAULT_TIMEOUT_SEC = 15.0


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class PPPDataLoader:
    """
    📥 Завантажує датасет PPP-факторів і повертає мапу alpha-3 → `PPPRecord`.
    """

    def __init__(
        self,
        source: str,
        *,
        reference_year: Union[str, int] = DEFAULT_REFERENCE_YEAR,
        timeout_sec: float = DEFAULT_TIMEOUT_SEC,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if not source or not isinstance(source, str):
            raise ConfigError("Config 'ppp_data.source' is required and must be str (set PPP_DATA_SOURCE).")
        self._source = source.strip()
        self._reference_year = str(reference_year).strip()
        self._timeout = timeout_sec
        self._client = client                                        # 🌐 Зовнішній клієнт (не закриваємо)
        logger.debug("⚙️ PPPDataLoader: source=%s year=%s", self._source, self._reference_year)

    @classmethod
    def from_config(cls, config: ConfigService, *, client: Optional[httpx.AsyncClient] = None) -> "PPPDataLoader":
        """🏗️ Створює loader з розділу `ppp_data` конфігурації."""
        return cls(
            config.get("ppp_data.source"),
            reference_year=config.get("ppp_data.reference_year", DEFAULT_REFERENCE_YEAR),
            timeout_sec=float(config.get("ppp_data.timeout_sec", DEFAULT_TIMEOUT_SEC) or DEFAULT_TIMEOUT_SEC),
            client=client,
        )

    @property
    def source(self) -> str:
        return self._source

    @property
    def reference_year(self) -> str:
        return self._reference_year

    async def load_ppp_data(self) -> Dict[str, PPPRecord]:
        """
        🔄 Читає ресурс і парсить його.

        Raises:
            DataFormatError: ресурс недоступний/відсутній, менше двох рядків,
                немає колонки референсного року.
        """
        text = await self._read_source()
        return parse_ppp_csv(text, self._reference_year, source=self._source)

    # ================================
    # 🔒 ВНУТРІШНЯ ЛОГІКА
    # ================================
    async def _read_source(self) -> str:
        if _is_url(self._source):
            return await self._fetch_text()
        return await self._read_file()

    async def _fetch_text(self) -> str:
        try:
            if self._client is not None:
                response = await self._client.get(self._source)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(self._source)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("❌ Датасет PPP: HTTP %s для %s", e.response.status_code, self._source)
            raise DataFormatError(
                "PPP dataset is unavailable",
                details=f"HTTP {e.response.status_code}",
                source=self._source,
            ) from e
        except httpx.HTTPError as e:
            logger.error("❌ Датасет PPP: мережева помилка %s", e)
            raise DataFormatError("PPP dataset is unavailable", details=str(e), source=self._source) from e

        logger.info("🌐 Датасет PPP отримано (%d байт)", len(response.content))
        return response.text

    async def _read_file(self) -> str:
        try:
            async with aiofiles.open(self._source, "r", encoding="utf-8-sig") as f:
                content = await f.read()
        except FileNotFoundError as e:
            logger.error("❌ Файл датасету PPP не знайдено: %s", self._source)
            raise DataFormatError("PPP dataset not found", source=self._source) from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error("❌ Не вдалося прочитати датасет PPP: %s", e)
            raise DataFormatError("PPP dataset is unreadable", details=str(e), source=self._source) from e

        logger.info("📖 Датасет PPP прочитано з диску: %s", self._source)
        return content


async def load_ppp_data(
    source: Optional[str] = None,
    reference_year: Optional[Union[str, int]] = None,
) -> Dict[str, PPPRecord]:
    """
    Зручна обгортка: завантажує датасет із явного джерела або з `ConfigService`.
    """
    if source is None:
        config = ConfigService()
        source = config.get("ppp_data.source")
        reference_year = reference_year or config.get("ppp_data.reference_year")
    loader = PPPDataLoader(source, reference_year=reference_year or DEFAULT_REFERENCE_YEAR)
    return await loader.load_ppp_data()


__all__ = ["PPPDataLoader", "load_ppp_data", "DEFAULT_REFERENCE_YEAR"]
