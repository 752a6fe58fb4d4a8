"""
Testes do AiohttpSessionManager (sem requisições de rede)
"""
import aiohttp
import pytest

from shared.config.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager,
)


@pytest.fixture(autouse=True)
def reset_singleton():
    AiohttpSessionManager.reset_instance()
    yield
    AiohttpSessionManager.reset_instance()


class TestAiohttpSessionManager:

    @pytest.mark.asyncio
    async def test_reuses_session_in_same_loop(self):
        manager = AiohttpSessionManager()

        first = await manager.get_session()
        second = await manager.get_session()

        assert isinstance(first, aiohttp.ClientSession)
        assert first is second
        await manager.cleanup()

    @pytest.mark.asyncio
    async def test_recreates_after_close(self):
        manager = AiohttpSessionManager()
        first = await manager.get_session()
        await manager.cleanup()

        second = await manager.get_session()

        assert first.closed
        assert second is not first
        await manager.cleanup()

    @pytest.mark.asyncio
    async def test_cleanup_without_session(self):
        await AiohttpSessionManager().cleanup()

    def test_singleton_factory(self):
        assert get_aiohttp_session_manager() is get_aiohttp_session_manager()

