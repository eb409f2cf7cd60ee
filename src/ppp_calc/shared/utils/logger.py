# 📜 ppp_calc/shared/utils/logger.py
"""
📜 Єдина схема логування для ядра PPP-калькулятора.

🔹 Ініціалізує кореневий логер `ppp_calc` із консольним та файловим виводом.
🔹 Підтримує JSON-формат файлу та приглушення сторонніх бібліотек (httpx, httpcore).
🔹 Надає хелпер для дочірніх логерів із загальним префіксом.
"""
from __future__ import annotations

# 🔠 Системні імпорти
import json									# 📦 Серіалізація payload логів
import logging									# 🪵 Робота з логерами Python
import sys									# 🧵 Потік stdout
import threading								# 🧵 Захист ініціалізації
from dataclasses import dataclass, field					# 🧱 DTO-конфіг логування
from logging.handlers import TimedRotatingFileHandler			# 📁 Хендлер з ротацією файлів
from pathlib import Path								# 📂 Операції з файловими шляхами
from typing import Any, Dict, Mapping, Optional, Union		# 🧰 Типи для конфігів

# ================================
# 🧾 КОНСТАНТИ МОДУЛЯ
# ================================
LOG_NAME: str = "ppp_calc"							# 🏷️ Базовий префікс логерів
PLAIN_FORMAT: str = "%(asctime)s [%(levelname)s] - (%(name)s).%(funcName)s(%(lineno)d) - %(message)s"
CONSOLE_FORMAT: str = "[%(levelname).1s] %(message)s"			# 🖥️ Мінімалістичний консольний формат
DEFAULT_SUPPRESS: Dict[str, str] = {"httpx": "WARNING", "httpcore": "WARNING"}	# 🙊 Шумні HTTP-логери

_lock = threading.Lock()							# 🔒 Блокуємо одночасну ініціалізацію

# Стандартні атрибути LogRecord, які не переносимо у JSON як extra
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


# ================================
# 🧾 DTO КОНФІГУРАЦІЇ
# ================================
@dataclass
class LoggingConfig:
    """Контейнер налаштувань логування з дефолтними значеннями."""
    level: str = "INFO"							# 🎚️ Глобальний рівень логів
    console: bool = True							# 🖥️ Чи вмикати консольний вивід
    json: bool = False								# 📦 JSON-формат для файлу
    file: Optional[str] = None						# 📁 Шлях до лог-файлу (None → без файлу)
    when: str = "midnight"						# ⏰ Періодичність ротації
    backup_count: int = 7							# ♻️ Скільки копій зберігати
    suppress: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SUPPRESS))


# ================================
# 🧰 ФОРМАТТЕР
# ================================
class JsonFormatter(logging.Formatter):
    """Форматує записи логів у плоский JSON (разом з extra-полями)."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, datefmt="%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "func": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RESERVED_ATTRS or key in payload:
                continue
            try:
                json.dumps(value)						# ✅ Перевіряємо серіалізованість
                payload[key] = value
            except (TypeError, ValueError):
                payload[key] = str(value)				# 🔄 Повертаємось до рядка
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


# ================================
# 🛠️ ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _to_level(value: Union[str, int, None], default: int) -> int:
    """Перетворює рядок/інт у числовий рівень логування."""
    if isinstance(value, int):
        return value
    if not value:
        return default
    return getattr(logging, str(value).upper(), default)


def _make_file_handler(cfg: LoggingConfig, fmt: logging.Formatter) -> logging.Handler:
    """Готує файловий хендлер із ротацією за часом."""
    log_path = Path(str(cfg.file))
    log_path.parent.mkdir(parents=True, exist_ok=True)		# 🧱 Гарантуємо існування директорії
    handler = TimedRotatingFileHandler(
        filename=str(log_path),
        when=cfg.when,
        backupCount=cfg.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(fmt)
    return handler


# ================================
# 🚀 ПУБЛІЧНИЙ API
# ================================
def init_logging(
    *,
    level: Optional[str] = None,
    console: Optional[bool] = None,
    json_mode: Optional[bool] = None,
    file: Optional[str] = None,
    suppress: Optional[Dict[str, str]] = None,
) -> logging.Logger:
    """Ініціалізує кореневий логер `ppp_calc` за єдиною схемою."""
    with _lock:
        cfg = LoggingConfig(
            level=level or "INFO",
            console=True if console is None else bool(console),
            json=bool(json_mode),
            file=file,
            suppress={**DEFAULT_SUPPRESS, **(suppress or {})},
        )

        root_logger = logging.getLogger(LOG_NAME)
        root_logger.setLevel(_to_level(cfg.level, logging.INFO))

        for handler in list(root_logger.handlers):			# 🧹 Прибираємо попередні хендлери
            root_logger.removeHandler(handler)
            handler.close()

        if cfg.console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
            root_logger.addHandler(console_handler)

        if cfg.file:
            fmt_file = JsonFormatter() if cfg.json else logging.Formatter(PLAIN_FORMAT)
            root_logger.addHandler(_make_file_handler(cfg, fmt_file))

        for name, lvl in cfg.suppress.items():			# 🙊 Знижуємо рівні сторонніх бібліотек
            logging.getLogger(name).setLevel(_to_level(lvl, logging.WARNING))

        root_logger.debug(
            "✅ Logging initialized | level=%s console=%s json=%s file=%s",
            cfg.level.upper(),
            "ON" if cfg.console else "OFF",
            "ON" if cfg.json else "OFF",
            cfg.file,
        )
        return root_logger


def init_logging_from_config(config: Optional[Mapping[str, Any]]) -> logging.Logger:
    """
    Ініціалізує логування на базі розділу `logging` з ConfigService.

    Args:
        config: Словник налаштувань (`level`, `console`, `json`, `file`, `suppress`).
    """
    node = config or {}
    return init_logging(
        level=node.get("level"),
        console=node.get("console"),
        json_mode=node.get("json"),
        file=node.get("file"),
        suppress=node.get("suppress"),
    )


def get_logger(suffix: Optional[str] = None) -> logging.Logger:
    """Повертає дочірній логер із префіксом `LOG_NAME`."""
    logger_name = LOG_NAME if not suffix else f"{LOG_NAME}.{suffix}"
    return logging.getLogger(logger_name)
