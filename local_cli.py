#!/usr/bin/env python3
"""
Entrypoint local para buscar o clima de cidades pelo terminal

Como usar:
    python local_cli.py London Paris     # busca cada cidade em ordem
    python local_cli.py --history        # lista o histórico de buscas
    python local_cli.py --json Tokyo     # resultado em JSON

Variáveis de ambiente (ou .env):
    OPENWEATHER_API_KEY, KV_STORE_BACKEND (memory|file|dynamodb), KV_STORE_PATH
"""
import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from load_env import apply_env_file


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Busca clima atual por cidade (com cache e histórico)')
    parser.add_argument('cities', nargs='*', help='Cidades a buscar, em ordem')
    parser.add_argument('--history', action='store_true', help='Lista o histórico de buscas')
    parser.add_argument('--json', action='store_true', help='Imprime resultados em JSON')
    parser.add_argument('--env-file', type=str, default=None, help='Arquivo .env a carregar')
    return parser.parse_args(argv)


def build_session(store=None, provider=None):
    """
    Monta a sessão de busca com as dependências configuradas

    Imports tardios: domain.constants lê o ambiente na importação,
    então o .env precisa estar aplicado antes.
    """
    from application.use_cases import SearchCityWeatherUseCase, WeatherSearchSession
    from infrastructure.adapters.cache.weather_store import WeatherStore
    from infrastructure.adapters.output.providers.openweather import get_openweather_provider
    from infrastructure.adapters.output.storage import get_key_value_store

    weather_store = WeatherStore(store if store is not None else get_key_value_store())
    weather_provider = provider if provider is not None else get_openweather_provider()
    return WeatherSearchSession(SearchCityWeatherUseCase(weather_provider, weather_store))


def format_result(result) -> str:
    """Linha de saída de uma busca (temperatura, ícone, descrição ou erro)"""
    if result.weather is None:
        return f"{result.city}: {result.error_message}"

    weather = result.weather
    source = " (cache)" if result.from_cache else ""
    return (
        f"{result.city}{source}: {weather.temperature.format_display()} "
        f"[{weather.icon_category.label}] {weather.description}"
    )


async def run(args: argparse.Namespace, session) -> int:
    """
    Executa as buscas pedidas

    Returns:
        0 se a última busca teve sucesso (ou só histórico), 1 caso contrário
    """
    exit_code = 0

    for city in args.cities:
        result = await session.search(city)
        if args.json:
            print(json.dumps(result.to_dict(), ensure_ascii=False))
        else:
            print(format_result(result))
        exit_code = 0 if result.is_success else 1

    if args.history:
        history = session.history
        if args.json:
            print(json.dumps({'history': history}, ensure_ascii=False))
        elif not history:
            print("(histórico vazio)")
        else:
            for position, city in enumerate(history, start=1):
                print(f"{position}. {city}")

    return exit_code


async def _main(args: argparse.Namespace) -> int:
    from shared.config.aiohttp_session_manager import get_aiohttp_session_manager

    session = build_session()
    try:
        return await run(args, session)
    finally:
        await get_aiohttp_session_manager().cleanup()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    env_file = Path(args.env_file) if args.env_file else Path(__file__).parent / '.env'
    apply_env_file(env_file)

    if not args.cities and not args.history:
        print("Nada a fazer: informe cidades ou --history", file=sys.stderr)
        return 2

    return asyncio.run(_main(args))


if __name__ == '__main__':
    sys.exit(main())
