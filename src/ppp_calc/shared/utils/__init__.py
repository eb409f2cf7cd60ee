# 🧰 ppp_calc/shared/utils/__init__.py
"""
🧰 Спільні утиліти: єдина схема логування.
"""

from __future__ import annotations

# 🔠 Логування
from .logger import (
    LOG_NAME,
    JsonFormatter,
    get_logger,
    init_logging,
    init_logging_from_config,
)

__all__ = [
    "LOG_NAME",
    "JsonFormatter",
    "get_logger",
    "init_logging",
    "init_logging_from_config",
]
