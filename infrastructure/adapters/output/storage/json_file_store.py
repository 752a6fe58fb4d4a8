"""
Output Adapter: armazenamento chave-valor em um arquivo JSON local
Equivalente local das preferências do usuário: sobrevive entre execuções

Formato do arquivo:
{
    "weatherCacheLondon": {"type": "bytes", "value": "<base64>"},
    "searchHistory": {"type": "list", "value": ["London", "Paris"]}
}
"""
import base64
import binascii
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from application.ports.output.key_value_store_port import IKeyValueStore
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

TYPE_BYTES = 'bytes'
TYPE_LIST = 'list'


class JsonFileKeyValueStore(IKeyValueStore):
    """
    Store em arquivo JSON único

    - Arquivo ausente ou corrompido é lido como vazio
    - Escrita atômica (arquivo temporário + os.replace)
    - Erros de escrita (permissão, disco) propagam para o chamador
    """

    def __init__(self, path: str):
        self.path = Path(path).expanduser()

    def _load(self) -> Dict[str, Any]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                document = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning("Store file unreadable, treating as empty", path=str(self.path), error=str(e))
            return {}

        return document if isinstance(document, dict) else {}

    def _dump(self, document: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(document, f, ensure_ascii=False, separators=(',', ':'))
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def _entry(self, key: str, expected_type: str) -> Optional[Any]:
        entry = self._load().get(key)
        if not isinstance(entry, dict) or entry.get('type') != expected_type:
            return None
        return entry.get('value')

    def get(self, key: str) -> Optional[bytes]:
        encoded = self._entry(key, TYPE_BYTES)
        if not isinstance(encoded, str):
            return None
        try:
            return base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError):
            return None

    def set(self, key: str, value: bytes) -> None:
        document = self._load()
        document[key] = {
            'type': TYPE_BYTES,
            'value': base64.b64encode(value).decode('ascii')
        }
        self._dump(document)

    def get_string_list(self, key: str) -> Optional[List[str]]:
        values = self._entry(key, TYPE_LIST)
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            return None
        return values

    def set_string_list(self, key: str, values: List[str]) -> None:
        document = self._load()
        document[key] = {'type': TYPE_LIST, 'value': list(values)}
        self._dump(document)
