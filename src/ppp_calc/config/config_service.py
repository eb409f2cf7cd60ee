# ⚙️ ppp_calc/config/config_service.py
"""
⚙️ config_service.py — Сервіс для доступу до статичної конфігурації.

🔹 Клас `ConfigService`:
- Завантажує дефолти з config.yaml і перекриває їх змінними з .env / оточення.
- Надає єдиний метод .get() для доступу до будь-якого параметра ('exchange_api.ttl_sec').
- Працює як Singleton; `from_dict()` створює ізольований екземпляр (тести, вбудовування).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import load_dotenv              # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import copy                                 # 🧬 Глибокі копії словників
import logging                              # 🧾 Логування
import os                                   # 📁 Доступ до змінних середовища
from pathlib import Path                    # 📁 Побудова шляху до файлів
from typing import Any, Dict, Mapping, Optional  # 🧩 Типізація

# 🧩 Внутрішні модулі проєкту
from ppp_calc.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config")

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"   # 📘 Дефолти поруч із модулем

# 🔐 Змінні оточення → крапкові ключі конфігурації
ENV_KEYS: Dict[str, str] = {
    "PPP_DATA_SOURCE": "ppp_data.source",
    "PPP_REFERENCE_YEAR": "ppp_data.reference_year",
    "EXCHANGE_API_URL": "exchange_api.url",
    "RATES_CACHE_FILE": "files.rates_cache",
    "LOG_LEVEL": "logging.level",
}


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх статичних конфігураційних параметрів ядра.
    Пріоритет: config.yaml → .env / змінні оточення.
    """

    _instance: Optional["ConfigService"] = None  # 🧩 Singleton-екземпляр
    _config: Dict[str, Any]                      # 📦 Обʼєднана конфігурація

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._config = {}
            instance._load_all_configs()
            cls._instance = instance
            logger.debug("🔄 Singleton ConfigService створено і конфігурація завантажена")
        return cls._instance

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, with_defaults: bool = True) -> "ConfigService":
        """
        🧪 Створює ізольований екземпляр (поза Singleton) з переданого словника.

        Args:
            data: Ієрархічний або крапковий словник значень.
            with_defaults: Чи підмішувати дефолти з config.yaml під `data`.
        """
        instance = object.__new__(cls)
        instance._config = cls._read_yaml(DEFAULT_CONFIG_PATH) if with_defaults else {}
        instance._deep_update(instance._config, instance._unflatten_dict(dict(data)))
        return instance

    @classmethod
    def reset(cls) -> None:
        """🧹 Скидає Singleton (потрібно тестам, що міняють оточення)."""
        cls._instance = None

    def _load_all_configs(self) -> None:
        """📥 Завантажує всі джерела конфігурації в один словник."""
        self._config = self._read_yaml(DEFAULT_CONFIG_PATH)

        load_dotenv()  # 🔐 Ініціалізує змінні середовища з файлу .env
        env_vars = {key: os.getenv(env) for env, key in ENV_KEYS.items() if os.getenv(env)}
        self._deep_update(self._config, self._unflatten_dict(env_vars))

        logger.info("✅ Конфігурацію успішно завантажено.")
        logger.debug("🔍 Обʼєднаний словник конфігурації: %s", self._config)

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (FileNotFoundError, yaml.YAMLError) as e:
            logger.warning("⚠️ Не вдалося завантажити %s: %s", path.name, e)
            return {}
        if not isinstance(loaded, dict):
            logger.warning("⚠️ %s має містити обʼєкт верхнього рівня", path.name)
            return {}
        return copy.deepcopy(loaded)

    def get(self, key: str, default: Any = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'exchange_api.url').

        Args:
            key (str): Ключ у форматі з крапкою.
            default (Any): Значення за замовчуванням, якщо ключ не знайдено.
        """
        value: Any = self._config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]                 # 🔎 Переходимо глибше в структуру
            else:
                logger.debug("❓ Ключ '%s' не знайдено, повертаємо значення за замовчуванням", key)
                return default
        return value

    def section(self, key: str) -> Dict[str, Any]:
        """📦 Повертає копію вкладеного розділу (або порожній словник)."""
        value = self.get(key, {})
        return dict(value) if isinstance(value, dict) else {}

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================

    @staticmethod
    def _unflatten_dict(d: Dict[str, Any]) -> Dict[str, Any]:
        """
        🔁 Перетворює ключі з крапками в ієрархічний словник.
        'exchange_api.url' → {'exchange_api': {'url': ...}}
        """
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split('.')
            d_ref = result
            for part in parts[:-1]:
                d_ref = d_ref.setdefault(part, {})
            if isinstance(value, dict):
                value = ConfigService._unflatten_dict(value)
            d_ref[parts[-1]] = value
        return result

    def _deep_update(self, source: Dict[str, Any], overrides: Dict[str, Any]) -> None:
        """🔁 Рекурсивно обʼєднує два словника (оновлення значень)."""
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(source.get(key), dict):
                self._deep_update(source[key], value)
            else:
                source[key] = value
