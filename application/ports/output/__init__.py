"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""

from .key_value_store_port import IKeyValueStore
from .weather_provider_port import IWeatherProvider
from .weather_store_port import IWeatherStore

__all__ = ['IKeyValueStore', 'IWeatherProvider', 'IWeatherStore']
