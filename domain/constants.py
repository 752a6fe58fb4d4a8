"""
Domain Constants - Todas as constantes da aplicação centralizadas
Endpoints, chaves de persistência e mensagens de erro
"""
import os


class API:
    """Constantes de APIs externas"""

    # OpenWeather (Current Weather Data 2.5)
    OPENWEATHER_BASE_URL = os.environ.get(
        'OPENWEATHER_BASE_URL',
        "https://api.openweathermap.org/data/2.5/weather"
    )
    # SECURITY: chave estática embutida no cliente; sobrescrever via env em produção
    OPENWEATHER_API_KEY = os.environ.get(
        'OPENWEATHER_API_KEY',
        "86f5b45c0e08b6165526f4c120590de7"
    )

    # Pool HTTP (sem timeout explícito: vale o default do aiohttp)
    HTTP_CONNECTION_LIMIT = 10
    HTTP_CONNECTION_LIMIT_PER_HOST = 5
    DNS_CACHE_TTL = 300  # segundos


class Storage:
    """Constantes da camada de persistência chave-valor"""

    # Prefixo concatenado ao nome da cidade, sem separador
    CACHE_KEY_PREFIX = "weatherCache"
    HISTORY_KEY = "searchHistory"

    # Backend: memory | file | dynamodb
    BACKEND = os.environ.get('KV_STORE_BACKEND', 'file').lower()
    FILE_PATH = os.environ.get(
        'KV_STORE_PATH',
        os.path.join(os.path.expanduser('~'), '.weather_search', 'store.json')
    )
    TABLE_NAME = os.environ.get('KV_STORE_TABLE_NAME', 'weather-search-store')
    AWS_REGION = os.environ.get('AWS_REGION', 'sa-east-1')


class Messages:
    """Mensagens exibidas ao usuário (texto fixo)"""

    DECODING_ERROR = "Failed to decode the data."
    SERVER_ERROR = "Server error. Please try again later."
    UNKNOWN_ERROR = "An unknown error occurred. Please try again."
