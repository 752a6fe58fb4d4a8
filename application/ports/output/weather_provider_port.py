"""Weather Provider Port - Interface para o provedor de clima atual"""
from abc import ABC, abstractmethod

from domain.entities.weather_data import WeatherData


class IWeatherProvider(ABC):
    """
    Interface do cliente de clima remoto.
    Uma chamada = uma requisição; sem cache e sem retry.
    """

    @abstractmethod
    async def fetch_weather(self, city: str) -> WeatherData:
        """
        Busca o clima atual de uma cidade

        Args:
            city: Nome da cidade, usado como digitado

        Returns:
            WeatherData decodificado

        Raises:
            WeatherServerError: Status HTTP diferente de 200
            WeatherDecodingError: Corpo 200 que não decodifica
            WeatherUnknownError: Nenhuma resposta (falha de transporte)
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex: 'OpenWeather')"""
        pass
