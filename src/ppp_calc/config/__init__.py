# ⚙️ ppp_calc/config/__init__.py
"""⚙️ Конфігурація ядра: `ConfigService` поверх config.yaml та .env."""

from .config_service import ConfigService

__all__ = ["ConfigService"]
