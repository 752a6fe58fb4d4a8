"""
Input Port: Interface para buscar o clima de uma cidade (cache -> API -> cache)
"""
from abc import ABC, abstractmethod
from typing import List

from application.dtos.responses import SearchResult


class ISearchCityWeatherUseCase(ABC):
    """Interface para caso de uso de busca de clima por cidade"""

    @abstractmethod
    async def execute(self, city: str) -> SearchResult:
        """
        Busca o clima de uma cidade

        Args:
            city: Nome da cidade digitado pelo usuário

        Returns:
            SearchResult com dados ou mensagem de erro (nunca lança WeatherError)
        """
        pass

    @abstractmethod
    def get_history(self) -> List[str]:
        """Histórico de buscas, mais recente primeiro"""
        pass
