"""OpenWeather Provider Package"""

from infrastructure.adapters.output.providers.openweather.openweather_provider import (
    OpenWeatherProvider,
    get_openweather_provider
)

__all__ = ['OpenWeatherProvider', 'get_openweather_provider']
