"""Key-value store backends + factory"""
from typing import Optional

from application.ports.output.key_value_store_port import IKeyValueStore
from domain.constants import Storage
from infrastructure.adapters.output.storage.in_memory_store import InMemoryKeyValueStore
from infrastructure.adapters.output.storage.json_file_store import JsonFileKeyValueStore


def get_key_value_store(backend: Optional[str] = None, **kwargs) -> IKeyValueStore:
    """
    Cria o backend de persistência configurado

    Args:
        backend: memory | file | dynamodb (padrão: env KV_STORE_BACKEND)
        **kwargs: Repassados ao construtor (path, table_name, client...)

    Returns:
        Instância de IKeyValueStore

    Raises:
        ValueError: Backend desconhecido
    """
    backend = (backend or Storage.BACKEND).lower()

    if backend == 'memory':
        return InMemoryKeyValueStore(**kwargs)
    if backend == 'file':
        return JsonFileKeyValueStore(kwargs.pop('path', Storage.FILE_PATH), **kwargs)
    if backend == 'dynamodb':
        # Import tardio: boto3 só é carregado quando o backend é usado
        from infrastructure.adapters.output.storage.dynamodb_store import DynamoDBKeyValueStore
        return DynamoDBKeyValueStore(**kwargs)

    raise ValueError(f"Unknown key-value store backend: {backend}")


__all__ = [
    'InMemoryKeyValueStore',
    'JsonFileKeyValueStore',
    'get_key_value_store'
]
