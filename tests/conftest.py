import pytest
from fastapi.testclient import TestClient

from collective.database.storage import JsonFileStorage, MemoryStorage
from collective.main import create_app
from collective.schemas.resource import Resource, ResourceCategory
from collective.services.entity_store import EntityStore
from collective.services.view_state import ViewStateRegistry


class FakeTable:
    """Minimal stand-in for a boto3 DynamoDB Table keyed by PK/SK"""

    table_name = "CollectiveApp_Test"

    def __init__(self):
        self.items = {}

    def get_item(self, Key):
        item = self.items.get((Key["PK"], Key["SK"]))
        return {"Item": dict(item)} if item is not None else {}

    def put_item(self, Item):
        self.items[(Item["PK"], Item["SK"])] = dict(Item)
        return {}


class FakeDynamoResource:
    def __init__(self):
        self.tables = {}

    def Table(self, name):
        return self.tables.setdefault(name, FakeTable())


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def store(memory_storage):
    """Entity store starting from the seed collections"""
    return EntityStore(memory_storage)


@pytest.fixture
def views():
    return ViewStateRegistry()


@pytest.fixture
def file_storage(tmp_path):
    return JsonFileStorage(tmp_path / "data")


@pytest.fixture
def dynamodb_resource():
    return FakeDynamoResource()


@pytest.fixture
def client(tmp_path):
    """Test client backed by a fresh file store in a temporary directory"""
    app = create_app()
    app.state.store = EntityStore(JsonFileStorage(tmp_path / "data"))
    app.state.views = ViewStateRegistry()

    with TestClient(app) as test_client:
        yield test_client

    # Clean up dependency overrides
    app.dependency_overrides = {}


@pytest.fixture
def sample_resource():
    return Resource(
        id="r-1",
        name="Hanfu set",
        category=ResourceCategory.COSTUME,
        description="Red hanfu with sash",
        location="Wardrobe A",
        itemCode="C-010",
        totalQuantity=2,
        availableQuantity=2,
        bookedDates=set(),
    )
