# 🚨 ppp_calc/shared/errors.py
"""
🚨 Ієрархія винятків ядра PPP-калькулятора.

🔹 `DataFormatError` — жорстка помилка датасету (немає файлу, мало рядків, немає колонки року).
🔹 `RatesFetchError` — внутрішній сигнал провайдера курсів, назовні не виходить.
🔹 `ConfigError` — некоректна конфігурація (також `ValueError`).
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Dict, Optional									# 📐 Типізація


# ================================
# ⚠️ КОДИ ПОМИЛОК
# ================================
class ErrorCode:
    """⚠️ Категорії помилок для logger.extra."""

    DATA_FORMAT = "data_format_error"								# 📄 Датасет PPP
    RATES_FETCH = "rates_fetch_error"								# 🌐 API курсів
    CONFIG = "config_error"											# ⚙️ Конфігурація
    UNKNOWN = "unknown_error"										# ❓ Резервний код


# ================================
# 🧠 БАЗОВИЙ ВИНЯТОК
# ================================
class AppError(Exception):
    """🧠 Базовий виняток застосунку з опційними деталями."""

    code: str = ErrorCode.UNKNOWN

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для logger.extra."""
        extra: Dict[str, object] = {"error_code": self.code}
        if self.details:
            extra["details"] = self.details
        return extra

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class DataFormatError(AppError):
    """📄 Датасет PPP відсутній або має некоректний формат."""

    code = ErrorCode.DATA_FORMAT

    def __init__(self, message: str, *, details: Optional[str] = None, source: Optional[str] = None) -> None:
        super().__init__(message, details=details)
        self.source = source										# 🔗 URL або шлях до датасету

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.source:
            extra["source"] = self.source
        return extra


class RatesFetchError(AppError):
    """🌐 Невдале отримання курсів (мережа, статус, формат відповіді)."""

    code = ErrorCode.RATES_FETCH

    def __init__(
        self,
        message: str,
        *,
        details: Optional[str] = None,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.url = url
        self.status_code = status_code

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.url:
            extra["url"] = self.url
        if self.status_code is not None:
            extra["status_code"] = self.status_code
        return extra


class ConfigError(AppError, ValueError):
    """⚙️ Відсутній або невалідний параметр конфігурації."""

    code = ErrorCode.CONFIG


__all__ = [
    "ErrorCode",
    "AppError",
    "DataFormatError",
    "RatesFetchError",
    "ConfigError",
]
