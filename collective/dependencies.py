from datetime import date

from fastapi import HTTPException, Path, Request

from collective import config
from collective.database.dynamodb import get_db_connection
from collective.database.storage import (
    CollectionStorage,
    DynamoCollectionStorage,
    JsonFileStorage,
)
from collective.services.description_service import DescriptionService
from collective.services.entity_store import EntityStore
from collective.services.view_state import ViewStateRegistry


def build_storage() -> CollectionStorage:
    """Pick the storage backend named by STORAGE_BACKEND"""
    backend = config.storage_backend()
    if backend == "dynamodb":
        dynamodb = get_db_connection()
        if dynamodb is None:
            raise RuntimeError("DynamoDB backend selected but no credentials")
        return DynamoCollectionStorage(dynamodb, config.table_name())
    if backend == "file":
        return JsonFileStorage(config.data_dir())
    raise ValueError(f"Unknown storage backend: {backend}")


def get_entity_store(request: Request) -> EntityStore:
    """Dependency returning the process-wide store built at startup"""
    return request.app.state.store


def get_view_states(request: Request) -> ViewStateRegistry:
    return request.app.state.views


def get_description_service() -> DescriptionService:
    return DescriptionService()


DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


def calendar_day(
    day: str = Path(pattern=DATE_PATTERN, description="Day as YYYY-MM-DD"),
) -> str:
    """Path day that is also a real calendar date"""
    try:
        date.fromisoformat(day)
    except ValueError:
        raise HTTPException(status_code=422, detail=f"Invalid calendar day: {day}")
    return day
