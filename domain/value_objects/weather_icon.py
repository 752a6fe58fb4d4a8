"""
Value Object para ícone da condição climática
Traduz os códigos de ícone do OpenWeather ("01d", "10n", ...) em categorias fechadas
"""
from enum import Enum


class IconCategory(Enum):
    """Categorias semânticas de ícone (valor, símbolo de exibição)"""
    CLEAR = ("clear", "sun.max")
    PARTLY_CLOUDY = ("partly-cloudy", "cloud.sun")
    CLOUDY = ("cloudy", "cloud")
    RAIN = ("rain", "cloud.rain")
    SUN_RAIN = ("sun-rain", "cloud.sun.rain")
    STORM = ("storm", "cloud.bolt")
    SNOW = ("snow", "cloud.snow")
    FOG = ("fog", "cloud.fog")
    UNKNOWN = ("unknown", "questionmark.circle")

    def __init__(self, label: str, symbol: str):
        self.label = label
        self.symbol = symbol


_ICON_CODES = {
    ("01d", "01n"): IconCategory.CLEAR,
    ("02d", "02n"): IconCategory.PARTLY_CLOUDY,
    ("03d", "03n", "04d", "04n"): IconCategory.CLOUDY,
    ("09d", "09n"): IconCategory.RAIN,
    ("10d", "10n"): IconCategory.SUN_RAIN,
    ("11d", "11n"): IconCategory.STORM,
    ("13d", "13n"): IconCategory.SNOW,
    ("50d", "50n"): IconCategory.FOG,
}

ICON_CATEGORY_BY_CODE = {
    code: category
    for codes, category in _ICON_CODES.items()
    for code in codes
}


def icon_category_for(code: str) -> IconCategory:
    """
    Retorna a categoria do código de ícone

    Args:
        code: Código do OpenWeather (ex: "10n")

    Returns:
        IconCategory correspondente, UNKNOWN se o código não é conhecido
    """
    return ICON_CATEGORY_BY_CODE.get(code, IconCategory.UNKNOWN)
