# 📄 ppp_calc/infrastructure/ppp/csv_parser.py
"""
📄 Парсер CSV-датасету PPP-факторів (World Bank формат: countryName,countryCode,…,2024,…).

🔹 `parse_csv_line` — розбиває рядок з урахуванням подвійних лапок.
🔹 `parse_ppp_csv` — будує мапу alpha-3 → `PPPRecord` для референсного року.

Правила рядків: замало колонок, порожні назва/код/значення, нечислове або
відʼємне значення → рядок тихо пропускається; дублікати коду — виграє пізніший.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування пропусків
import math                                                         # 🔢 NaN / inf
from typing import Dict, List, Optional, Union                      # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from ppp_calc.domain.ppp.entities import PPPRecord
from ppp_calc.shared.errors import DataFormatError
from ppp_calc.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.infrastructure.ppp.csv")

QUOTE = '"'
DELIMITER = ","


def parse_csv_line(line: str) -> List[str]:
    """
    Розбиває рядок CSV на поля.

    Лапка перемикає режим «всередині лапок» і в значення не потрапляє;
    кома всередині лапок не є роздільником. Незакрита лапка — решта рядка
    належить полю.
    """
    result: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            result.append("".join(current))
            current = []
        else:
            current.append(char)

    result.append("".join(current))
    return result


def _parse_factor(raw: str) -> Optional[float]:
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    # 0 лишається записом без фактора; відʼємні значення відкидаються
    return value if math.isfinite(value) and value >= 0 else None


def parse_ppp_csv(
    text: str,
    reference_year: Union[str, int] = "2024",
    *,
    source: Optional[str] = None,
) -> Dict[str, PPPRecord]:
    """
    Парсить текст датасету у мапу `country_code → PPPRecord`.

    Raises:
        DataFormatError: менше двох рядків, порожній заголовок або немає колонки року.
    """
    year_label = str(reference_year).strip()
    lines = [line.rstrip("\r") for line in text.lstrip("\ufeff").strip().split("\n")]
    if len(lines) < 2:
        raise DataFormatError("Invalid CSV file", details="fewer than two lines", source=source)

    header_line = lines[0]
    if not header_line.strip():
        raise DataFormatError("Invalid CSV file: missing header", source=source)
    headers = [h.strip() for h in parse_csv_line(header_line)]

    try:
        year_index = headers.index(year_label)
    except ValueError:
        raise DataFormatError(f"{year_label} data not found in CSV", source=source) from None

    year = int(year_label) if year_label.isdigit() else 0
    data: Dict[str, PPPRecord] = {}
    skipped = 0

    for line_no, line in enumerate(lines[1:], start=2):
        if not line:
            continue
        values = parse_csv_line(line)
        if len(values) < max(year_index + 1, 2):
            skipped += 1
            continue

        country_name, country_code, ppp_value = values[0], values[1], values[year_index]
        if not country_name or not country_code or not ppp_value.strip():
            skipped += 1
            continue

        factor = _parse_factor(ppp_value)
        if factor is None:
            logger.debug("🔹 Рядок %d: непридатне значення %r для %s", line_no, ppp_value, country_code)
            skipped += 1
            continue

        if country_code in data:
            logger.debug("🔁 Дублікат %s у рядку %d — перезаписую", country_code, line_no)
        data[country_code] = PPPRecord(
            country_name=country_name,
            country_code=country_code,
            ppp_factor=factor,
            year=year,
        )

    logger.info("📊 PPP-датасет: прийнято %d країн, пропущено %d рядків (рік %s)", len(data), skipped, year_label)
    return data


__all__ = ["parse_csv_line", "parse_ppp_csv"]
