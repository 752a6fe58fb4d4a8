"""
Output Adapter: armazenamento chave-valor em memória
Backend padrão dos testes e do modo efêmero (KV_STORE_BACKEND=memory)
"""
from typing import Any, Dict, List, Optional

from application.ports.output.key_value_store_port import IKeyValueStore


class InMemoryKeyValueStore(IKeyValueStore):
    """Dict em memória; bytes e listas convivem no mesmo espaço de chaves"""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        value = self._data.get(key)
        return value if isinstance(value, bytes) else None

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    def get_string_list(self, key: str) -> Optional[List[str]]:
        value = self._data.get(key)
        if not isinstance(value, list):
            return None
        return list(value)

    def set_string_list(self, key: str, values: List[str]) -> None:
        self._data[key] = list(values)

    def keys(self) -> List[str]:
        return list(self._data.keys())

    def clear(self) -> None:
        self._data.clear()
