# 🔌 ppp_calc/infrastructure/adapters/__init__.py
from __future__ import annotations

from .calculator_facade import CalculatorState, PPPCalculator, build_calculator

__all__ = ["CalculatorState", "PPPCalculator", "build_calculator"]
