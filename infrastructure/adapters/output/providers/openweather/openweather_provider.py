"""OpenWeather Provider - Clima atual por nome de cidade (Current Weather Data 2.5)"""

import asyncio
from typing import Optional

import aiohttp
from ddtrace import tracer

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import API
from domain.entities.weather_data import WeatherData
from domain.exceptions import (
    WeatherDecodingError,
    WeatherServerError,
    WeatherUnknownError,
)
from infrastructure.adapters.output.providers.openweather.mappers import OpenWeatherDataMapper
from shared.config.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager,
)
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class OpenWeatherProvider(IWeatherProvider):
    """
    Provider para o endpoint /weather do OpenWeather

    Características:
    - Uma requisição GET por chamada (q=<cidade>&appid=<chave>)
    - Sem cache (responsabilidade do WeatherStore), sem retry
    - Falhas classificadas em WeatherServerError / WeatherDecodingError / WeatherUnknownError
    - 100% async com aiohttp
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        session_manager: Optional[AiohttpSessionManager] = None
    ):
        """
        Inicializa provider

        Args:
            api_key: OpenWeather API key (constante/env se None)
            base_url: URL do endpoint (constante/env se None)
            session_manager: Gerenciador de sessão HTTP (singleton se None)
        """
        self.api_key = api_key or API.OPENWEATHER_API_KEY
        self.base_url = base_url or API.OPENWEATHER_BASE_URL

        self.session_manager = session_manager or get_aiohttp_session_manager(
            limit=API.HTTP_CONNECTION_LIMIT,
            limit_per_host=API.HTTP_CONNECTION_LIMIT_PER_HOST,
            ttl_dns_cache=API.DNS_CACHE_TTL
        )

    @property
    def provider_name(self) -> str:
        return "OpenWeather"

    @tracer.wrap(resource="openweather.fetch_weather")
    async def fetch_weather(self, city: str) -> WeatherData:
        """
        Busca o clima atual de uma cidade

        Flow:
        1. GET no endpoint (cidade repassada sem validação)
        2. Status != 200 -> WeatherServerError
        3. Decodifica corpo -> WeatherData ou WeatherDecodingError

        Args:
            city: Nome da cidade

        Returns:
            WeatherData decodificado

        Raises:
            WeatherServerError: Status HTTP diferente de 200
            WeatherDecodingError: Corpo da resposta 200 inválido
            WeatherUnknownError: Nenhuma resposta recebida
        """
        params = {
            'q': city,
            'appid': self.api_key
        }

        # 📡 Única tentativa
        try:
            session = await self.session_manager.get_session()
            async with session.get(self.base_url, params=params) as response:
                status = response.status
                body = await response.read() if status == 200 else None
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(
                "OpenWeather request failed without response",
                city=city,
                error=str(e),
                error_type=type(e).__name__
            )
            raise WeatherUnknownError(details={'city': city, 'cause': type(e).__name__}) from e

        if status != 200:
            logger.warning("OpenWeather returned error status", city=city, status=status)
            raise WeatherServerError(details={'city': city, 'status': status})

        # 🔄 Decodificar resposta
        try:
            weather = OpenWeatherDataMapper.map_current_weather(body)
        except ValueError as e:
            logger.warning("OpenWeather response could not be decoded", city=city, error=str(e))
            raise WeatherDecodingError(details={'city': city, 'cause': str(e)}) from e

        logger.info("OpenWeather data fetched", city=city, temperature_kelvin=weather.temperature_kelvin)
        return weather


# Factory singleton
_provider_instance = None


def get_openweather_provider(
    api_key: Optional[str] = None,
    base_url: Optional[str] = None
) -> OpenWeatherProvider:
    """
    Factory para obter singleton do provider
    Reutiliza a sessão HTTP entre buscas

    Note: api_key e base_url só têm efeito na primeira chamada;
    chamadas seguintes retornam a instância já criada e ignoram os argumentos.
    """
    global _provider_instance

    if _provider_instance is None:
        _provider_instance = OpenWeatherProvider(api_key=api_key, base_url=base_url)

    return _provider_instance
