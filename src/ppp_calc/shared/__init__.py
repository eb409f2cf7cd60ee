# 🧰 ppp_calc/shared/__init__.py
"""🧰 Спільні компоненти: логування та ієрархія винятків."""
