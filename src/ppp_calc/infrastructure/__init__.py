# 🏗️ ppp_calc/infrastructure/__init__.py
"""🏗️ Інфраструктурний шар: I/O датасету, мережа курсів, кеші та фасад калькулятора."""
