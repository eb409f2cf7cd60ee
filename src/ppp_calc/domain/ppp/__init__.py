# 📊 ppp_calc/domain/ppp/__init__.py
"""📊 Пакет `domain.ppp`: сутності `PPPRecord` та `Country`."""

from .entities import Country, PPPRecord

__all__ = ["Country", "PPPRecord"]
