"""
Output Adapter: armazenamento chave-valor em uma tabela DynamoDB

Estrutura do item:
{
    "key": "weatherCacheLondon",
    "value": <B: bytes> | <L: [S, S, ...]>,
    "updatedAt": "2025-11-25T10:00:00+00:00"
}
"""
from datetime import datetime, timezone
from typing import Any, List, Optional

import boto3
from botocore.config import Config

from application.ports.output.key_value_store_port import IKeyValueStore
from domain.constants import Storage
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class DynamoDBKeyValueStore(IKeyValueStore):
    """
    Store sobre DynamoDB (partition key "key")

    Sem TTL: itens são sobrescritos a cada escrita.
    ClientError/BotoCoreError propagam; quem chama decide se engole.
    """

    def __init__(
        self,
        table_name: Optional[str] = None,
        client: Any = None,
        region_name: Optional[str] = None
    ):
        """
        Args:
            table_name: Nome da tabela (padrão: env KV_STORE_TABLE_NAME)
            client: Cliente boto3 dynamodb já criado (testes/injeção)
            region_name: Região AWS (padrão: env AWS_REGION)
        """
        self.table_name = table_name or Storage.TABLE_NAME
        self.region_name = region_name or Storage.AWS_REGION

        if client is None:
            config = Config(
                connect_timeout=2,
                read_timeout=3,
                retries={'max_attempts': 1}
            )
            client = boto3.client('dynamodb', region_name=self.region_name, config=config)
            logger.info("DynamoDB key-value store initialized", table=self.table_name)

        self.client = client

    def _get_value(self, key: str) -> Optional[dict]:
        response = self.client.get_item(
            TableName=self.table_name,
            Key={'key': {'S': key}},
            ConsistentRead=True
        )
        item = response.get('Item')
        if not item:
            return None
        return item.get('value')

    def _put_value(self, key: str, value: dict) -> None:
        self.client.put_item(
            TableName=self.table_name,
            Item={
                'key': {'S': key},
                'value': value,
                'updatedAt': {'S': datetime.now(timezone.utc).isoformat()}
            }
        )

    def get(self, key: str) -> Optional[bytes]:
        value = self._get_value(key)
        if not value or 'B' not in value:
            return None
        return bytes(value['B'])

    def set(self, key: str, value: bytes) -> None:
        self._put_value(key, {'B': value})

    def get_string_list(self, key: str) -> Optional[List[str]]:
        value = self._get_value(key)
        if not value or 'L' not in value:
            return None

        strings = []
        for element in value['L']:
            if 'S' not in element:
                return None
            strings.append(element['S'])
        return strings

    def set_string_list(self, key: str, values: List[str]) -> None:
        self._put_value(key, {'L': [{'S': v} for v in values]})
