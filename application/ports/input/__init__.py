"""Input Ports - Contratos dos casos de uso"""

from .search_city_weather_port import ISearchCityWeatherUseCase

__all__ = ['ISearchCityWeatherUseCase']
