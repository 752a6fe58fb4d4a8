"""
OpenWeather Data Mapper - Transforma respostas da API OpenWeather em entities
LOCALIZAÇÃO: infrastructure (conhece o formato externo)
"""
import json
from typing import Union

from domain.entities.weather_data import WeatherData


def _reject_constant(name: str):
    """NaN, Infinity e -Infinity não são JSON válido"""
    raise ValueError(f"Invalid JSON constant: {name}")


class OpenWeatherDataMapper:
    """
    Mapper para o endpoint /data/2.5/weather

    Consome apenas main.temp e weather[].description/icon;
    todo o resto da resposta é ignorado.
    """

    @staticmethod
    def map_current_weather(body: Union[bytes, str]) -> WeatherData:
        """
        Decodifica o corpo da resposta em WeatherData

        Args:
            body: Corpo bruto da resposta (JSON)

        Returns:
            WeatherData

        Raises:
            ValueError: JSON inválido ou formato inesperado
                (json.JSONDecodeError e UnicodeDecodeError são ValueError;
                NaN/Infinity e aninhamento excessivo também viram ValueError)
        """
        try:
            payload = json.loads(body, parse_constant=_reject_constant)
        except RecursionError as e:
            raise ValueError("JSON nesting too deep") from e
        return WeatherData.from_dict(payload)
