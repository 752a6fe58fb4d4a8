"""Response DTOs - Contratos de saída dos use cases"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from domain.entities.weather_data import WeatherData


class SearchState(Enum):
    """Estados da busca: Idle -> CacheCheck -> (HitDisplay | MissFetching) -> (Success | Failure)"""
    IDLE = "idle"
    CACHE_CHECK = "cache_check"
    HIT_DISPLAY = "hit_display"
    MISS_FETCHING = "miss_fetching"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class SearchResult:
    """Resultado de uma busca (estado terminal + dados ou mensagem de erro)"""
    city: str
    state: SearchState
    weather: Optional[WeatherData] = None
    error_message: Optional[str] = None

    @property
    def from_cache(self) -> bool:
        return self.state == SearchState.HIT_DISPLAY

    @property
    def is_success(self) -> bool:
        return self.weather is not None and self.error_message is None

    def to_dict(self) -> Dict[str, Any]:
        """
        Converte para dict serializável

        Returns:
            Dict com estado, temperatura nas três escalas e condição principal
        """
        result: Dict[str, Any] = {
            'city': self.city,
            'state': self.state.value,
            'fromCache': self.from_cache,
            'error': self.error_message,
            'weather': None
        }

        if self.weather is not None:
            temperature = self.weather.temperature
            category = self.weather.icon_category
            result['weather'] = {
                'temperatureKelvin': self.weather.temperature_kelvin,
                'temperatureCelsius': round(temperature.celsius, 2),
                'temperatureFahrenheit': round(temperature.fahrenheit, 2),
                'display': temperature.format_display(),
                'description': self.weather.description,
                'iconCode': self.weather.icon_code,
                'iconCategory': category.label,
                'iconSymbol': category.symbol
            }

        return result
