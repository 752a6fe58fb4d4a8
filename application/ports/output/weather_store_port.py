"""
Output Port: Interface para cache por cidade e histórico de buscas
"""
from typing import List, Optional, Protocol

from domain.entities.weather_data import WeatherData


class IWeatherStore(Protocol):
    """Cache do último clima por cidade + histórico de buscas (nunca lança)"""

    def get_cached(self, city: str) -> Optional[WeatherData]:
        ...

    def save(self, city: str, data: WeatherData) -> None:
        ...

    def record_history(self, city: str) -> None:
        ...

    def get_history(self) -> List[str]:
        ...
