"""
Aiohttp Session Manager - Singleton para gerenciar sessão HTTP global
Reutiliza a sessão entre buscas dentro do mesmo event loop
"""
import asyncio
from typing import Optional
import aiohttp

from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class AiohttpSessionManager:
    """
    Gerenciador singleton de sessão aiohttp

    - Reutiliza sessão entre chamadas no mesmo event loop
    - Detecta mudanças de event loop (asyncio.run cria novos loops)
    - Sem timeout explícito: vale o ClientTimeout default do aiohttp

    Uso:
        manager = AiohttpSessionManager.get_instance()
        session = await manager.get_session()
        async with session.get(url) as response:
            body = await response.read()
    """

    _instance: Optional['AiohttpSessionManager'] = None

    def __init__(
        self,
        limit: int = 10,
        limit_per_host: int = 5,
        ttl_dns_cache: int = 300
    ):
        """
        Inicializa gerenciador de sessão aiohttp

        Args:
            limit: Limite total de conexões no pool
            limit_per_host: Limite de conexões por host
            ttl_dns_cache: TTL do cache DNS em segundos
        """
        self.limit = limit
        self.limit_per_host = limit_per_host
        self.ttl_dns_cache = ttl_dns_cache

        # Session state
        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop_id: Optional[int] = None

    @classmethod
    def get_instance(
        cls,
        limit: int = 10,
        limit_per_host: int = 5,
        ttl_dns_cache: int = 300
    ) -> 'AiohttpSessionManager':
        """
        Retorna instância singleton do gerenciador

        Parâmetros só valem na primeira criação.
        """
        if cls._instance is None:
            cls._instance = cls(
                limit=limit,
                limit_per_host=limit_per_host,
                ttl_dns_cache=ttl_dns_cache
            )
            logger.debug("AiohttpSessionManager singleton created", limit=limit)

        return cls._instance

    async def get_session(self) -> aiohttp.ClientSession:
        """
        Retorna sessão aiohttp (cria ou reutiliza)

        Returns:
            Sessão aiohttp ligada ao event loop corrente
        """
        current_loop_id = id(asyncio.get_running_loop())

        if (self._session is not None and
                not self._session.closed and
                self._session_loop_id == current_loop_id):
            return self._session

        # Loop mudou: a sessão antiga não pode ser usada neste loop
        if self._session is not None and not self._session.closed:
            logger.debug(
                "Event loop changed - recreating session",
                old_loop_id=self._session_loop_id,
                new_loop_id=current_loop_id
            )
            await self._close_session()

        connector = aiohttp.TCPConnector(
            limit=self.limit,
            limit_per_host=self.limit_per_host,
            ttl_dns_cache=self.ttl_dns_cache
        )
        self._session = aiohttp.ClientSession(connector=connector)
        self._session_loop_id = current_loop_id

        logger.debug("Aiohttp session created", loop_id=current_loop_id)
        return self._session

    async def _close_session(self) -> None:
        if self._session is not None and not self._session.closed:
            try:
                await self._session.close()
            except Exception as e:
                logger.warning("Error closing aiohttp session", error=str(e))
            finally:
                self._session = None
                self._session_loop_id = None

    async def cleanup(self) -> None:
        """Fecha a sessão; chamar ao final do processo"""
        await self._close_session()

    @classmethod
    def reset_instance(cls) -> None:
        """Reset singleton instance (útil para testes)"""
        cls._instance = None


def get_aiohttp_session_manager(
    limit: int = 10,
    limit_per_host: int = 5,
    ttl_dns_cache: int = 300
) -> AiohttpSessionManager:
    """Factory function para obter instância singleton do gerenciador"""
    return AiohttpSessionManager.get_instance(
        limit=limit,
        limit_per_host=limit_per_host,
        ttl_dns_cache=ttl_dns_cache
    )
