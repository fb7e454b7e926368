"""Supported currencies and their display conventions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrencyInfo:
    code: str
    name: str
    symbol: str
    position: str  # "before" | "after"
    decimal_places: int
    countries: str


SUPPORTED_CURRENCIES: tuple[CurrencyInfo, ...] = (
    CurrencyInfo("USD", "US Dollar", "$", "before", 2, "United States"),
    CurrencyInfo("EUR", "Euro", "€", "before", 2, "European Union"),
    CurrencyInfo("GBP", "British Pound", "£", "before", 2, "United Kingdom"),
    CurrencyInfo("CAD", "Canadian Dollar", "C$", "before", 2, "Canada"),
    CurrencyInfo("AUD", "Australian Dollar", "A$", "before", 2, "Australia"),
    CurrencyInfo("JPY", "Japanese Yen", "¥", "before", 0, "Japan"),
    CurrencyInfo("CHF", "Swiss Franc", "CHF", "after", 2, "Switzerland"),
    CurrencyInfo("SEK", "Swedish Krona", "kr", "after", 2, "Sweden"),
    CurrencyInfo("NOK", "Norwegian Krone", "kr", "after", 2, "Norway"),
    CurrencyInfo("DKK", "Danish Krone", "kr", "after", 2, "Denmark"),
    CurrencyInfo("PLN", "Polish Złoty", "zł", "after", 2, "Poland"),
    CurrencyInfo("CZK", "Czech Koruna", "Kč", "after", 2, "Czech Republic"),
    CurrencyInfo("HUF", "Hungarian Forint", "Ft", "after", 0, "Hungary"),
    CurrencyInfo("RON", "Romanian Leu", "lei", "after", 2, "Romania"),
    CurrencyInfo("BGN", "Bulgarian Lev", "лв", "after", 2, "Bulgaria"),
    CurrencyInfo("HRK", "Croatian Kuna", "kn", "after", 2, "Croatia"),
    CurrencyInfo("NZD", "New Zealand Dollar", "NZ$", "before", 2, "New Zealand"),
    CurrencyInfo("ZAR", "South African Rand", "R", "before", 2, "South Africa"),
    CurrencyInfo("BRL", "Brazilian Real", "R$", "before", 2, "Brazil"),
    CurrencyInfo("MXN", "Mexican Peso", "$", "before", 2, "Mexico"),
    CurrencyInfo("ARS", "Argentine Peso", "$", "before", 2, "Argentina"),
    CurrencyInfo("CLP", "Chilean Peso", "$", "before", 0, "Chile"),
    CurrencyInfo("COP", "Colombian Peso", "$", "before", 0, "Colombia"),
    CurrencyInfo("PEN", "Peruvian Sol", "S/", "before", 2, "Peru"),
    CurrencyInfo("INR", "Indian Rupee", "₹", "before", 2, "India"),
    CurrencyInfo("CNY", "Chinese Yuan", "¥", "before", 2, "China"),
    CurrencyInfo("KRW", "South Korean Won", "₩", "before", 0, "South Korea"),
    CurrencyInfo("SGD", "Singapore Dollar", "S$", "before", 2, "Singapore"),
    CurrencyInfo("HKD", "Hong Kong Dollar", "HK$", "before", 2, "Hong Kong"),
    CurrencyInfo("TWD", "Taiwan Dollar", "NT$", "before", 2, "Taiwan"),
    CurrencyInfo("THB", "Thai Baht", "฿", "before", 2, "Thailand"),
    CurrencyInfo("PHP", "Philippine Peso", "₱", "before", 2, "Philippines"),
    CurrencyInfo("MYR", "Malaysian Ringgit", "RM", "before", 2, "Malaysia"),
    CurrencyInfo("IDR", "Indonesian Rupiah", "Rp", "before", 0, "Indonesia"),
    CurrencyInfo("VND", "Vietnamese Dong", "₫", "after", 0, "Vietnam"),
    CurrencyInfo("RUB", "Russian Ruble", "₽", "after", 2, "Russia"),
    CurrencyInfo("TRY", "Turkish Lira", "₺", "before", 2, "Turkey"),
    CurrencyInfo("ILS", "Israeli Shekel", "₪", "before", 2, "Israel"),
    CurrencyInfo("AED", "UAE Dirham", "د.إ", "before", 2, "UAE"),
    CurrencyInfo("SAR", "Saudi Riyal", "ر.س", "before", 2, "Saudi Arabia"),
    CurrencyInfo("EGP", "Egyptian Pound", "ج.م", "before", 2, "Egypt"),
)

_BY_CODE: dict[str, CurrencyInfo] = {c.code: c for c in SUPPORTED_CURRENCIES}


def get_currency_info(code: str | None) -> CurrencyInfo:
    """Look up a currency by ISO code, falling back to USD."""
    if isinstance(code, str):
        info = _BY_CODE.get(code.strip().upper())
        if info is not None:
            return info
    return SUPPORTED_CURRENCIES[0]
