"""
Configurações e fixtures compartilhadas para testes unitários
"""
import json
import os

# Desliga envio de spans do ddtrace antes de importar a aplicação
os.environ.setdefault('DD_TRACE_ENABLED', 'false')
os.environ.setdefault('POWERTOOLS_LOG_LEVEL', 'WARNING')

from unittest.mock import AsyncMock, MagicMock

import pytest

from domain.entities.weather_data import WeatherCondition, WeatherData
from infrastructure.adapters.output.storage.in_memory_store import InMemoryKeyValueStore


@pytest.fixture
def make_weather_data():
    """
    Factory fixture para criar WeatherData com valores padrão

    Usage:
        def test_something(make_weather_data):
            weather = make_weather_data(temperature_kelvin=280.0, icon='10n')
    """
    def _make(
        temperature_kelvin: float = 300.0,
        description: str = 'clear sky',
        icon: str = '01d'
    ) -> WeatherData:
        return WeatherData(
            temperature_kelvin=temperature_kelvin,
            conditions=(WeatherCondition(description=description, icon=icon),)
        )

    return _make


@pytest.fixture
def openweather_payload():
    """Resposta real (resumida) do endpoint /data/2.5/weather"""
    return {
        'coord': {'lon': -0.1257, 'lat': 51.5085},
        'weather': [
            {'id': 500, 'main': 'Rain', 'description': 'light rain', 'icon': '10n'},
            {'id': 701, 'main': 'Mist', 'description': 'mist', 'icon': '50n'}
        ],
        'base': 'stations',
        'main': {
            'temp': 284.2,
            'feels_like': 283.5,
            'temp_min': 283.1,
            'temp_max': 285.3,
            'pressure': 1012,
            'humidity': 87
        },
        'visibility': 8000,
        'name': 'London',
        'cod': 200
    }


@pytest.fixture
def memory_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def make_http_response():
    """
    Factory fixture para simular resposta aiohttp usada como context manager

    __aexit__ retorna False para não engolir exceções levantadas dentro do bloco
    """
    def _make(status: int = 200, body=b''):
        if isinstance(body, (dict, list)):
            body = json.dumps(body).encode('utf-8')
        response = MagicMock()
        response.status = status
        response.read = AsyncMock(return_value=body)
        response.__aenter__ = AsyncMock(return_value=response)
        response.__aexit__ = AsyncMock(return_value=False)
        return response

    return _make


@pytest.fixture
def make_session_manager():
    """Factory fixture: session manager mockado cuja sessão responde com `response`"""
    def _make(response=None, side_effect=None):
        session = MagicMock()
        if side_effect is not None:
            session.get = MagicMock(side_effect=side_effect)
        else:
            session.get = MagicMock(return_value=response)

        manager = MagicMock()
        manager.get_session = AsyncMock(return_value=session)
        manager.session = session
        return manager

    return _make
