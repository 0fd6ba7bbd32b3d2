"""Key/value backends holding one JSON array string per named collection."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)


class CollectionStorage(ABC):
    """Raw string storage keyed by collection storage key."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored text, or None if nothing was ever saved."""
        ...

    @abstractmethod
    def put(self, key: str, value: str) -> None:
        ...


class MemoryStorage(CollectionStorage):
    def __init__(self, initial: Optional[dict] = None):
        self.items = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def put(self, key: str, value: str) -> None:
        self.items[key] = value


class JsonFileStorage(CollectionStorage):
    """One ``<key>.json`` file per collection inside ``directory``."""

    def __init__(self, directory):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def put(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(value, encoding="utf-8")
        tmp_path.replace(path)


class DynamoCollectionStorage(CollectionStorage):
    """One item per collection: PK=COLLECTION#<key>, SK=SNAPSHOT."""

    def __init__(self, dynamodb_resource, table_name="CollectiveApp"):
        self.dynamodb = dynamodb_resource
        self.table = dynamodb_resource.Table(table_name)

    def get(self, key: str) -> Optional[str]:
        try:
            response = self.table.get_item(
                Key={"PK": f"COLLECTION#{key}", "SK": "SNAPSHOT"}
            )
        except ClientError as e:
            raise Exception(f"Failed to load collection {key}: {e}")
        item = response.get("Item")
        if item is None:
            return None
        return item.get("payload")

    def put(self, key: str, value: str) -> None:
        item = {
            "PK": f"COLLECTION#{key}",
            "SK": "SNAPSHOT",
            "collection": key,
            "payload": value,
        }
        try:
            self.table.put_item(Item=item)
        except ClientError as e:
            raise Exception(f"Failed to save collection {key}: {e}")
