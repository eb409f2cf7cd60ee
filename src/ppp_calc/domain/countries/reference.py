# 🌍 ppp_calc/domain/countries/reference.py
"""
🌍 Статичний довідник країна ↔ валюта ↔ назва валюти ↔ прапор ↔ регіон.

🔹 `COUNTRY_TO_CURRENCY` — основний напрям (ISO 3166-1 alpha-3 → ISO 4217), many-to-one.
🔹 `get_currency_to_country_code()` — зворотна мапа «валюта → представник»:
    перший-виграє за порядком основної мапи, крім явно закріплених валют
    із `REPRESENTATIVE_OVERRIDES` (EUR → DEU).
🔹 Чисті lookup-функції без I/O.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from types import MappingProxyType                                  # 🧊 Незмінні мапи
from typing import Dict, Mapping, Optional, Tuple                   # 🧰 Типізація


# ================================
# 🗺️ РЕГІОНИ
# ================================
EAP = "East Asia & Pacific"
ECA = "Europe & Central Asia"
LAC = "Latin America & Caribbean"
MENA = "Middle East & North Africa"
NORTH_AMERICA = "North America"
SAS = "South Asia"
SSA = "Sub-Saharan Africa"


# ================================
# 📋 ТАБЛИЦЯ КРАЇН: (alpha-3, alpha-2, валюта, регіон)
# ================================
# Порядок значущий: зворотна мапа бере першу країну для кожної валюти.
_COUNTRY_ROWS: Tuple[Tuple[str, str, str, str], ...] = (
    ("USA", "US", "USD", NORTH_AMERICA),
    ("GBR", "GB", "GBP", ECA),
    ("JPN", "JP", "JPY", EAP),
    ("CAN", "CA", "CAD", NORTH_AMERICA),
    ("AUS", "AU", "AUD", EAP),
    ("IND", "IN", "INR", SAS),
    ("CHN", "CN", "CNY", EAP),
    # 💶 Єврозона
    ("AUT", "AT", "EUR", ECA),
    ("BEL", "BE", "EUR", ECA),
    ("CYP", "CY", "EUR", ECA),
    ("EST", "EE", "EUR", ECA),
    ("FIN", "FI", "EUR", ECA),
    ("FRA", "FR", "EUR", ECA),
    ("DEU", "DE", "EUR", ECA),
    ("GRC", "GR", "EUR", ECA),
    ("HRV", "HR", "EUR", ECA),
    ("IRL", "IE", "EUR", ECA),
    ("ITA", "IT", "EUR", ECA),
    ("LVA", "LV", "EUR", ECA),
    ("LTU", "LT", "EUR", ECA),
    ("LUX", "LU", "EUR", ECA),
    ("MLT", "MT", "EUR", ECA),
    ("NLD", "NL", "EUR", ECA),
    ("PRT", "PT", "EUR", ECA),
    ("SVK", "SK", "EUR", ECA),
    ("SVN", "SI", "EUR", ECA),
    ("ESP", "ES", "EUR", ECA),
    # 🌐 Решта економік
    ("ABW", "AW", "AWG", LAC),
    ("AFG", "AF", "AFN", SAS),
    ("AGO", "AO", "AOA", SSA),
    ("ALB", "AL", "ALL", ECA),
    ("AND", "AD", "EUR", ECA),
    ("ARE", "AE", "AED", MENA),
    ("ARG", "AR", "ARS", LAC),
    ("ARM", "AM", "AMD", ECA),
    ("ATG", "AG", "XCD", LAC),
    ("AZE", "AZ", "AZN", ECA),
    ("BDI", "BI", "BIF", SSA),
    ("BEN", "BJ", "XOF", SSA),
    ("BFA", "BF", "XOF", SSA),
    ("BGD", "BD", "BDT", SAS),
    ("BGR", "BG", "BGN", ECA),
    ("BHR", "BH", "BHD", MENA),
    ("BHS", "BS", "BSD", LAC),
    ("BIH", "BA", "BAM", ECA),
    ("BLR", "BY", "BYN", ECA),
    ("BLZ", "BZ", "BZD", LAC),
    ("BMU", "BM", "BMD", NORTH_AMERICA),
    ("BOL", "BO", "BOB", LAC),
    ("BRA", "BR", "BRL", LAC),
    ("BRB", "BB", "BBD", LAC),
    ("BRN", "BN", "BND", EAP),
    ("BTN", "BT", "BTN", SAS),
    ("BWA", "BW", "BWP", SSA),
    ("CAF", "CF", "XAF", SSA),
    ("CHE", "CH", "CHF", ECA),
    ("CHL", "CL", "CLP", LAC),
    ("CIV", "CI", "XOF", SSA),
    ("CMR", "CM", "XAF", SSA),
    ("COD", "CD", "CDF", SSA),
    ("COG", "CG", "XAF", SSA),
    ("COL", "CO", "COP", LAC),
    ("COM", "KM", "KMF", SSA),
    ("CPV", "CV", "CVE", SSA),
    ("CRI", "CR", "CRC", LAC),
    ("CUW", "CW", "ANG", LAC),
    ("CYM", "KY", "KYD", LAC),
    ("CZE", "CZ", "CZK", ECA),
    ("DJI", "DJ", "DJF", MENA),
    ("DMA", "DM", "XCD", LAC),
    ("DNK", "DK", "DKK", ECA),
    ("DOM", "DO", "DOP", LAC),
    ("DZA", "DZ", "DZD", MENA),
    ("ECU", "EC", "USD", LAC),
    ("EGY", "EG", "EGP", MENA),
    ("ERI", "ER", "ERN", SSA),
    ("ETH", "ET", "ETB", SSA),
    ("FJI", "FJ", "FJD", EAP),
    ("FSM", "FM", "USD", EAP),
    ("GAB", "GA", "XAF", SSA),
    ("GEO", "GE", "GEL", ECA),
    ("GHA", "GH", "GHS", SSA),
    ("GIN", "GN", "GNF", SSA),
    ("GMB", "GM", "GMD", SSA),
    ("GNB", "GW", "XOF", SSA),
    ("GNQ", "GQ", "XAF", SSA),
    ("GRD", "GD", "XCD", LAC),
    ("GTM", "GT", "GTQ", LAC),
    ("GUY", "GY", "GYD", LAC),
    ("HKG", "HK", "HKD", EAP),
    ("HND", "HN", "HNL", LAC),
    ("HTI", "HT", "HTG", LAC),
    ("HUN", "HU", "HUF", ECA),
    ("IDN", "ID", "IDR", EAP),
    ("IRN", "IR", "IRR", MENA),
    ("IRQ", "IQ", "IQD", MENA),
    ("ISL", "IS", "ISK", ECA),
    ("ISR", "IL", "ILS", MENA),
    ("JAM", "JM", "JMD", LAC),
    ("JOR", "JO", "JOD", MENA),
    ("KAZ", "KZ", "KZT", ECA),
    ("KEN", "KE", "KES", SSA),
    ("KGZ", "KG", "KGS", ECA),
    ("KHM", "KH", "KHR", EAP),
    ("KIR", "KI", "AUD", EAP),
    ("KNA", "KN", "XCD", LAC),
    ("KOR", "KR", "KRW", EAP),
    ("KWT", "KW", "KWD", MENA),
    ("LAO", "LA", "LAK", EAP),
    ("LBN", "LB", "LBP", MENA),
    ("LBR", "LR", "LRD", SSA),
    ("LBY", "LY", "LYD", MENA),
    ("LCA", "LC", "XCD", LAC),
    ("LKA", "LK", "LKR", SAS),
    ("LSO", "LS", "LSL", SSA),
    ("MAC", "MO", "MOP", EAP),
    ("MAR", "MA", "MAD", MENA),
    ("MDA", "MD", "MDL", ECA),
    ("MDG", "MG", "MGA", SSA),
    ("MDV", "MV", "MVR", SAS),
    ("MEX", "MX", "MXN", LAC),
    ("MHL", "MH", "USD", EAP),
    ("MKD", "MK", "MKD", ECA),
    ("MLI", "ML", "XOF", SSA),
    ("MMR", "MM", "MMK", EAP),
    ("MNE", "ME", "EUR", ECA),
    ("MNG", "MN", "MNT", EAP),
    ("MOZ", "MZ", "MZN", SSA),
    ("MRT", "MR", "MRU", SSA),
    ("MUS", "MU", "MUR", SSA),
    ("MWI", "MW", "MWK", SSA),
    ("MYS", "MY", "MYR", EAP),
    ("NAM", "NA", "NAD", SSA),
    ("NER", "NE", "XOF", SSA),
    ("NGA", "NG", "NGN", SSA),
    ("NIC", "NI", "NIO", LAC),
    ("NOR", "NO", "NOK", ECA),
    ("NPL", "NP", "NPR", SAS),
    ("NRU", "NR", "AUD", EAP),
    ("NZL", "NZ", "NZD", EAP),
    ("OMN", "OM", "OMR", MENA),
    ("PAK", "PK", "PKR", SAS),
    ("PAN", "PA", "PAB", LAC),
    ("PER", "PE", "PEN", LAC),
    ("PHL", "PH", "PHP", EAP),
    ("PLW", "PW", "USD", EAP),
    ("PNG", "PG", "PGK", EAP),
    ("POL", "PL", "PLN", ECA),
    ("PRI", "PR", "USD", LAC),
    ("PRY", "PY", "PYG", LAC),
    ("PSE", "PS", "ILS", MENA),
    ("QAT", "QA", "QAR", MENA),
    ("ROU", "RO", "RON", ECA),
    ("RUS", "RU", "RUB", ECA),
    ("RWA", "RW", "RWF", SSA),
    ("SAU", "SA", "SAR", MENA),
    ("SDN", "SD", "SDG", SSA),
    ("SEN", "SN", "XOF", SSA),
    ("SGP", "SG", "SGD", EAP),
    ("SLB", "SB", "SBD", EAP),
    ("SLE", "SL", "SLE", SSA),
    ("SLV", "SV", "USD", LAC),
    ("SMR", "SM", "EUR", ECA),
    ("SOM", "SO", "SOS", SSA),
    ("SRB", "RS", "RSD", ECA),
    ("SSD", "SS", "SSP", SSA),
    ("STP", "ST", "STN", SSA),
    ("SUR", "SR", "SRD", LAC),
    ("SWE", "SE", "SEK", ECA),
    ("SWZ", "SZ", "SZL", SSA),
    ("SYC", "SC", "SCR", SSA),
    ("SYR", "SY", "SYP", MENA),
    ("TCD", "TD", "XAF", SSA),
    ("TGO", "TG", "XOF", SSA),
    ("THA", "TH", "THB", EAP),
    ("TJK", "TJ", "TJS", ECA),
    ("TKM", "TM", "TMT", ECA),
    ("TLS", "TL", "USD", EAP),
    ("TON", "TO", "TOP", EAP),
    ("TTO", "TT", "TTD", LAC),
    ("TUN", "TN", "TND", MENA),
    ("TUR", "TR", "TRY", ECA),
    ("TUV", "TV", "AUD", EAP),
    ("TZA", "TZ", "TZS", SSA),
    ("UGA", "UG", "UGX", SSA),
    ("UKR", "UA", "UAH", ECA),
    ("URY", "UY", "UYU", LAC),
    ("UZB", "UZ", "UZS", ECA),
    ("VCT", "VC", "XCD", LAC),
    ("VEN", "VE", "VES", LAC),
    ("VNM", "VN", "VND", EAP),
    ("VUT", "VU", "VUV", EAP),
    ("WSM", "WS", "WST", EAP),
    ("XKX", "XK", "EUR", ECA),
    ("YEM", "YE", "YER", MENA),
    ("ZAF", "ZA", "ZAR", SSA),
    ("ZMB", "ZM", "ZMW", SSA),
    ("ZWE", "ZW", "ZWL", SSA),
)


# ================================
# 🔗 ПОХІДНІ МАПИ
# ================================
COUNTRY_TO_CURRENCY: Mapping[str, str] = MappingProxyType(
    {alpha3: currency for alpha3, _, currency, _ in _COUNTRY_ROWS}
)
ALPHA3_TO_ALPHA2: Mapping[str, str] = MappingProxyType(
    {alpha3: alpha2 for alpha3, alpha2, _, _ in _COUNTRY_ROWS}
)
COUNTRY_REGIONS: Mapping[str, str] = MappingProxyType(
    {alpha3: region for alpha3, _, _, region in _COUNTRY_ROWS}
)

# 📌 Валюти зі спільним використанням, де представник закріплений явно.
# Для EUR первинна мапа дала б AUT (перший у порядку вставки); політика: DEU.
REPRESENTATIVE_OVERRIDES: Mapping[str, str] = MappingProxyType({"EUR": "DEU"})


# ================================
# 🏷️ НАЗВИ ВАЛЮТ
# ================================
CURRENCY_NAMES: Mapping[str, str] = MappingProxyType({
    "AED": "UAE Dirham",
    "AFN": "Afghan Afghani",
    "ALL": "Albanian Lek",
    "AMD": "Armenian Dram",
    "ANG": "Netherlands Antillean Guilder",
    "AOA": "Angolan Kwanza",
    "ARS": "Argentine Peso",
    "AUD": "Australian Dollar",
    "AWG": "Aruban Florin",
    "AZN": "Azerbaijani Manat",
    "BAM": "Bosnia-Herzegovina Convertible Mark",
    "BBD": "Barbadian Dollar",
    "BDT": "Bangladeshi Taka",
    "BGN": "Bulgarian Lev",
    "BHD": "Bahraini Dinar",
    "BIF": "Burundian Franc",
    "BMD": "Bermudian Dollar",
    "BND": "Brunei Dollar",
    "BOB": "Bolivian Boliviano",
    "BRL": "Brazilian Real",
    "BSD": "Bahamian Dollar",
    "BTN": "Bhutanese Ngultrum",
    "BWP": "Botswana Pula",
    "BYN": "Belarusian Ruble",
    "BZD": "Belize Dollar",
    "CAD": "Canadian Dollar",
    "CDF": "Congolese Franc",
    "CHF": "Swiss Franc",
    "CLP": "Chilean Peso",
    "CNY": "Chinese Yuan",
    "COP": "Colombian Peso",
    "CRC": "Costa Rican Colón",
    "CVE": "Cape Verdean Escudo",
    "CZK": "Czech Koruna",
    "DJF": "Djiboutian Franc",
    "DKK": "Danish Krone",
    "DOP": "Dominican Peso",
    "DZD": "Algerian Dinar",
    "EGP": "Egyptian Pound",
    "ERN": "Eritrean Nakfa",
    "ETB": "Ethiopian Birr",
    "EUR": "Euro",
    "FJD": "Fijian Dollar",
    "GBP": "British Pound",
    "GEL": "Georgian Lari",
    "GHS": "Ghanaian Cedi",
    "GMD": "Gambian Dalasi",
    "GNF": "Guinean Franc",
    "GTQ": "Guatemalan Quetzal",
    "GYD": "Guyanese Dollar",
    "HKD": "Hong Kong Dollar",
    "HNL": "Honduran Lempira",
    "HTG": "Haitian Gourde",
    "HUF": "Hungarian Forint",
    "IDR": "Indonesian Rupiah",
    "ILS": "Israeli New Shekel",
    "INR": "Indian Rupee",
    "IQD": "Iraqi Dinar",
    "IRR": "Iranian Rial",
    "ISK": "Icelandic Króna",
    "JMD": "Jamaican Dollar",
    "JOD": "Jordanian Dinar",
    "JPY": "Japanese Yen",
    "KES": "Kenyan Shilling",
    "KGS": "Kyrgyzstani Som",
    "KHR": "Cambodian Riel",
    "KMF": "Comorian Franc",
    "KRW": "South Korean Won",
    "KWD": "Kuwaiti Dinar",
    "KYD": "Cayman Islands Dollar",
    "KZT": "Kazakhstani Tenge",
    "LAK": "Lao Kip",
    "LBP": "Lebanese Pound",
    "LKR": "Sri Lankan Rupee",
    "LRD": "Liberian Dollar",
    "LSL": "Lesotho Loti",
    "LYD": "Libyan Dinar",
    "MAD": "Moroccan Dirham",
    "MDL": "Moldovan Leu",
    "MGA": "Malagasy Ariary",
    "MKD": "Macedonian Denar",
    "MMK": "Myanmar Kyat",
    "MNT": "Mongolian Tögrög",
    "MOP": "Macanese Pataca",
    "MRU": "Mauritanian Ouguiya",
    "MUR": "Mauritian Rupee",
    "MVR": "Maldivian Rufiyaa",
    "MWK": "Malawian Kwacha",
    "MXN": "Mexican Peso",
    "MYR": "Malaysian Ringgit",
    "MZN": "Mozambican Metical",
    "NAD": "Namibian Dollar",
    "NGN": "Nigerian Naira",
    "NIO": "Nicaraguan Córdoba",
    "NOK": "Norwegian Krone",
    "NPR": "Nepalese Rupee",
    "NZD": "New Zealand Dollar",
    "OMR": "Omani Rial",
    "PAB": "Panamanian Balboa",
    "PEN": "Peruvian Sol",
    "PGK": "Papua New Guinean Kina",
    "PHP": "Philippine Peso",
    "PKR": "Pakistani Rupee",
    "PLN": "Polish Złoty",
    "PYG": "Paraguayan Guaraní",
    "QAR": "Qatari Riyal",
    "RON": "Romanian Leu",
    "RSD": "Serbian Dinar",
    "RUB": "Russian Ruble",
    "RWF": "Rwandan Franc",
    "SAR": "Saudi Riyal",
    "SBD": "Solomon Islands Dollar",
    "SCR": "Seychellois Rupee",
    "SDG": "Sudanese Pound",
    "SEK": "Swedish Krona",
    "SGD": "Singapore Dollar",
    "SLE": "Sierra Leonean Leone",
    "SOS": "Somali Shilling",
    "SRD": "Surinamese Dollar",
    "SSP": "South Sudanese Pound",
    "STN": "São Tomé and Príncipe Dobra",
    "SYP": "Syrian Pound",
    "SZL": "Swazi Lilangeni",
    "THB": "Thai Baht",
    "TJS": "Tajikistani Somoni",
    "TMT": "Turkmenistani Manat",
    "TND": "Tunisian Dinar",
    "TOP": "Tongan Paʻanga",
    "TRY": "Turkish Lira",
    "TTD": "Trinidad and Tobago Dollar",
    "TZS": "Tanzanian Shilling",
    "UAH": "Ukrainian Hryvnia",
    "UGX": "Ugandan Shilling",
    "USD": "US Dollar",
    "UYU": "Uruguayan Peso",
    "UZS": "Uzbekistani Som",
    "VES": "Venezuelan Bolívar",
    "VND": "Vietnamese Dong",
    "VUV": "Vanuatu Vatu",
    "WST": "Samoan Tālā",
    "XAF": "Central African CFA Franc",
    "XCD": "East Caribbean Dollar",
    "XOF": "West African CFA Franc",
    "YER": "Yemeni Rial",
    "ZAR": "South African Rand",
    "ZMW": "Zambian Kwacha",
    "ZWL": "Zimbabwean Dollar",
})


# ================================
# 🔍 LOOKUP-ФУНКЦІЇ
# ================================
def _norm(code: Optional[str]) -> str:
    return (code or "").strip().upper()


def get_currency_code(country_code: Optional[str]) -> Optional[str]:
    """Повертає ISO 4217 код валюти країни або None, якщо країни немає в довіднику."""
    return COUNTRY_TO_CURRENCY.get(_norm(country_code))


def get_currency_name(currency_code: str) -> str:
    """Назва валюти для відображення; невідомий код повертається як є."""
    return CURRENCY_NAMES.get(_norm(currency_code), currency_code)


def get_region(country_code: Optional[str]) -> Optional[str]:
    return COUNTRY_REGIONS.get(_norm(country_code))


def get_flag(country_code: Optional[str]) -> Optional[str]:
    """
    🏳️ Прапор-емодзі з alpha-3 коду (через alpha-2 і regional indicator symbols).

    Returns:
        Рядок із двох символів, напр. "🇩🇪", або None для невідомого коду.
    """
    alpha2 = ALPHA3_TO_ALPHA2.get(_norm(country_code))
    if not alpha2:
        return None
    return "".join(chr(0x1F1E6 + ord(letter) - ord("A")) for letter in alpha2)


def get_currency_to_country_code() -> Dict[str, str]:
    """
    🔁 Будує зворотну мапу «валюта → країна-представник».

    Правило: для кожної валюти береться перша країна основної мапи;
    винятки з `REPRESENTATIVE_OVERRIDES` мають пріоритет і не перезаписуються.
    """
    reverse_map: Dict[str, str] = dict(REPRESENTATIVE_OVERRIDES)
    for country_code, currency_code in COUNTRY_TO_CURRENCY.items():
        reverse_map.setdefault(currency_code, country_code)
    return reverse_map


__all__ = [
    "COUNTRY_TO_CURRENCY",
    "ALPHA3_TO_ALPHA2",
    "COUNTRY_REGIONS",
    "CURRENCY_NAMES",
    "REPRESENTATIVE_OVERRIDES",
    "get_currency_code",
    "get_currency_name",
    "get_region",
    "get_flag",
    "get_currency_to_country_code",
]
