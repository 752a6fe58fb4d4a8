"""
Output Port: Interface para o armazenamento chave-valor persistente
Usado para desacoplar o WeatherStore do backend (memória, arquivo, DynamoDB)
"""
from typing import List, Optional, Protocol


class IKeyValueStore(Protocol):
    """Armazenamento chave-valor com valores em bytes e listas de strings"""

    def get(self, key: str) -> Optional[bytes]:
        """
        Lê bytes da chave (None se ausente ou se a chave guarda outro tipo)
        """
        ...

    def set(self, key: str, value: bytes) -> None:
        """
        Grava bytes, sobrescrevendo qualquer valor anterior
        """
        ...

    def get_string_list(self, key: str) -> Optional[List[str]]:
        """
        Lê lista de strings (None se ausente ou se a chave guarda outro tipo)
        """
        ...

    def set_string_list(self, key: str, values: List[str]) -> None:
        """
        Grava lista de strings, sobrescrevendo qualquer valor anterior
        """
        ...
