# 🏛️ ppp_calc/domain/__init__.py
"""🏛️ Доменний шар: DTO, контракти, статичні довідники та чисті обчислення (без I/O)."""
