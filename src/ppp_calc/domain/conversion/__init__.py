# 🧮 ppp_calc/domain/conversion/__init__.py
"""🧮 Пакет `domain.conversion`: двійна конвертація (ринок + PPP)."""

from .engine import ConversionOutcome, PPPFactors, calculate_conversion, ppp_factor_table

__all__ = ["ConversionOutcome", "PPPFactors", "calculate_conversion", "ppp_factor_table"]
