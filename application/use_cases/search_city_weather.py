"""
Async Use Case: Search City Weather
Fluxo cache -> API -> cache + histórico de uma busca do usuário
"""
from typing import List, Optional

from ddtrace import tracer

from application.dtos.responses import SearchResult, SearchState
from application.ports.input.search_city_weather_port import ISearchCityWeatherUseCase
from application.ports.output.weather_provider_port import IWeatherProvider
from application.ports.output.weather_store_port import IWeatherStore
from domain.entities.weather_data import WeatherData
from domain.exceptions import WeatherError
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


def error_message_for(error: Exception) -> str:
    """Mensagem exibida ao usuário para uma falha da busca"""
    if isinstance(error, WeatherError):
        return error.message
    return str(error) or type(error).__name__


class SearchCityWeatherUseCase(ISearchCityWeatherUseCase):
    """Async use case: weather for one city, cache first"""

    def __init__(
        self,
        weather_provider: IWeatherProvider,
        weather_store: IWeatherStore
    ):
        self.weather_provider = weather_provider
        self.weather_store = weather_store

    @tracer.wrap(resource="use_case.search_city_weather")
    async def execute(self, city: str) -> SearchResult:
        """
        Execute use case asynchronously

        Cache hit returns immediately: no network call, no history
        update and no re-cache. On a miss the provider is called once;
        success is cached and recorded in history, failure leaves both
        untouched.

        Args:
            city: City name as typed (used verbatim as key)

        Returns:
            SearchResult in HIT_DISPLAY, SUCCESS or FAILURE state
        """
        # 🔍 CacheCheck
        cached = self.weather_store.get_cached(city)
        if cached is not None:
            logger.info("Weather cache hit", city=city)
            return SearchResult(city=city, state=SearchState.HIT_DISPLAY, weather=cached)

        # 📡 MissFetching
        logger.info("Weather cache miss, fetching", city=city)
        try:
            weather = await self.weather_provider.fetch_weather(city)
        except Exception as e:
            message = error_message_for(e)
            logger.warning(
                "Weather search failed",
                city=city,
                error=message,
                error_type=type(e).__name__
            )
            return SearchResult(city=city, state=SearchState.FAILURE, error_message=message)

        # 💾 Success
        self.weather_store.save(city, weather)
        self.weather_store.record_history(city)
        return SearchResult(city=city, state=SearchState.SUCCESS, weather=weather)

    def get_history(self) -> List[str]:
        return self.weather_store.get_history()


class WeatherSearchSession:
    """
    Estado da tela de busca

    Guarda o clima exibido e a mensagem de erro corrente. Cada busca
    sobrescreve o que estava na tela; falhas mostram a mensagem e mantêm
    o último clima exibido. Buscas concorrentes não são enfileiradas:
    a última a terminar define o clima exibido, e `state` só volta a
    IDLE quando nenhuma busca está em andamento.
    """

    def __init__(self, use_case: ISearchCityWeatherUseCase):
        self.use_case = use_case
        self.current_weather: Optional[WeatherData] = None
        self.error_message: Optional[str] = None
        self.state = SearchState.IDLE
        self.last_state: Optional[SearchState] = None
        self._in_flight = 0

    @property
    def history(self) -> List[str]:
        return self.use_case.get_history()

    async def search(self, city: str) -> SearchResult:
        """
        Executa uma busca e atualiza o estado exibido

        Args:
            city: Nome da cidade

        Returns:
            SearchResult da busca
        """
        self._in_flight += 1
        self.state = SearchState.CACHE_CHECK
        try:
            result = await self.use_case.execute(city)
        finally:
            self._in_flight -= 1
            if self._in_flight == 0:
                self.state = SearchState.IDLE

        if result.weather is not None:
            self.current_weather = result.weather
            self.error_message = None
        else:
            self.error_message = result.error_message

        self.last_state = result.state
        return result

    async def search_from_history(self, index: int) -> SearchResult:
        """
        Repete a busca de uma cidade do histórico

        Raises:
            IndexError: Índice fora do histórico
        """
        history = self.history
        if index < 0 or index >= len(history):
            raise IndexError(f"History index out of range: {index}")
        return await self.search(history[index])
