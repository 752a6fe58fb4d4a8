"""Application Use Cases - 100% ASYNC com providers desacoplados"""
from .search_city_weather import SearchCityWeatherUseCase, WeatherSearchSession

__all__ = [
    'SearchCityWeatherUseCase',
    'WeatherSearchSession'
]
