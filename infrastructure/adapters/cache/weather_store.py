"""
Weather Store - Cache do último clima por cidade + histórico de buscas
Sobre um IKeyValueStore injetado; nenhuma falha chega ao chamador
"""
import json
from typing import Callable, List, Optional

from application.ports.output.key_value_store_port import IKeyValueStore
from application.ports.output.weather_store_port import IWeatherStore
from domain.constants import Storage
from domain.entities.weather_data import WeatherData
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

ErrorHook = Callable[[str, Exception], None]


def encode_weather_data(data: WeatherData) -> bytes:
    """Serializa WeatherData como JSON compacto (mesmo formato da API)"""
    return json.dumps(data.to_dict(), separators=(',', ':')).encode('utf-8')


def decode_weather_data(raw: bytes) -> WeatherData:
    """
    Desserializa bytes gravados por encode_weather_data

    Raises:
        ValueError: Bytes não representam um WeatherData
    """
    return WeatherData.from_dict(json.loads(raw))


def cache_key_for(city: str) -> str:
    """Prefixo + cidade, sem separador (colisões possíveis são aceitas)"""
    return f"{Storage.CACHE_KEY_PREFIX}{city}"


class WeatherStore(IWeatherStore):
    """
    Cache por cidade e histórico de buscas

    - Cache: uma entrada por cidade, sobrescrita a cada sucesso (sem TTL)
    - Histórico: mais recente primeiro, sem duplicatas, sem limite
    - Falhas (chave ausente, decode, encode, backend) viram None/no-op;
      on_error(operação, exceção) permite observá-las
    """

    def __init__(self, store: IKeyValueStore, on_error: Optional[ErrorHook] = None):
        self.store = store
        self.on_error = on_error

    def _report(self, operation: str, error: Exception, **fields) -> None:
        logger.warning(
            "Weather store operation failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
            **fields
        )
        if self.on_error is None:
            return
        try:
            self.on_error(operation, error)
        except Exception as hook_error:
            logger.warning("Weather store error hook failed", operation=operation, error=str(hook_error))

    def get_cached(self, city: str) -> Optional[WeatherData]:
        """
        Busca o clima em cache da cidade

        Returns:
            WeatherData ou None (ausente ou ilegível)
        """
        try:
            raw = self.store.get(cache_key_for(city))
            if raw is None:
                return None
            return decode_weather_data(raw)
        except Exception as e:
            self._report('get_cached', e, city=city)
            return None

    def save(self, city: str, data: WeatherData) -> None:
        """Grava o clima da cidade sobrescrevendo o anterior"""
        try:
            self.store.set(cache_key_for(city), encode_weather_data(data))
        except Exception as e:
            self._report('save', e, city=city)

    def record_history(self, city: str) -> None:
        """Move (ou insere) a cidade para o topo do histórico"""
        try:
            cities = self._read_history()
            cities = [c for c in cities if c != city]
            cities.insert(0, city)
            self.store.set_string_list(Storage.HISTORY_KEY, cities)
        except Exception as e:
            self._report('record_history', e, city=city)

    def get_history(self) -> List[str]:
        """Histórico de buscas, mais recente primeiro (vazio se não houver)"""
        try:
            return self._read_history()
        except Exception as e:
            self._report('get_history', e)
            return []

    def _read_history(self) -> List[str]:
        return list(self.store.get_string_list(Storage.HISTORY_KEY) or [])
