"""In-memory entity collections with save-on-every-mutation persistence.

Each collection is loaded once when the store is built and written back as a
JSON array after every accepted mutation. Only the touched collection is saved.
"""

import json
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Type

from pydantic import BaseModel, TypeAdapter, ValidationError

from collective.database import seed
from collective.database.storage import CollectionStorage
from collective.schemas.event import Event
from collective.schemas.partner import LocationPartner, MakeupArtist
from collective.schemas.resource import Resource
from collective.schemas.theme import ThemePlan

logger = logging.getLogger(__name__)

EVENTS = "events"
RESOURCES = "resources"
THEME_PLANS = "theme-plans"
LOCATIONS = "locations"
MAKEUP_ARTISTS = "makeup-artists"


@dataclass(frozen=True)
class CollectionSpec:
    storage_key: str
    model: Type[BaseModel]
    seed: Callable[[], list]


COLLECTIONS: Dict[str, CollectionSpec] = {
    EVENTS: CollectionSpec("gf_events", Event, seed.seed_events),
    RESOURCES: CollectionSpec("gf_resources", Resource, seed.seed_resources),
    THEME_PLANS: CollectionSpec("gf_themes", ThemePlan, seed.seed_theme_plans),
    LOCATIONS: CollectionSpec("gf_locations", LocationPartner, seed.seed_empty),
    MAKEUP_ARTISTS: CollectionSpec("gf_makeup", MakeupArtist, seed.seed_empty),
}

Observer = Callable[[str, list], None]


class EntityStore:
    def __init__(self, storage: CollectionStorage):
        self.storage = storage
        self._observers: List[Observer] = []
        self._collections: Dict[str, list] = {
            name: self.load(name) for name in COLLECTIONS
        }

    def _spec(self, name: str) -> CollectionSpec:
        if name not in COLLECTIONS:
            raise KeyError(f"Unknown collection: {name}")
        return COLLECTIONS[name]

    def _seed(self, name: str) -> list:
        spec = self._spec(name)
        return TypeAdapter(List[spec.model]).validate_python(spec.seed())

    def load(self, name: str) -> list:
        """Read a collection from storage, falling back to its seed"""
        spec = self._spec(name)
        try:
            raw = self.storage.get(spec.storage_key)
        except Exception as e:
            logger.error("Failed to read %s, using seed data: %s", spec.storage_key, e)
            return self._seed(name)

        if raw is None:
            return self._seed(name)

        try:
            data = json.loads(raw)
            return TypeAdapter(List[spec.model]).validate_python(data)
        except json.JSONDecodeError as e:
            logger.warning("Corrupt JSON in %s, using seed data: %s", spec.storage_key, e)
        except ValidationError as e:
            logger.warning(
                "Invalid records in %s, using seed data: %s",
                spec.storage_key,
                e.error_count(),
            )
        return self._seed(name)

    def save(self, name: str) -> None:
        spec = self._spec(name)
        items = self._collections[name]
        payload = json.dumps(
            [item.model_dump(mode="json") for item in items], ensure_ascii=False
        )
        self.storage.put(spec.storage_key, payload)
        logger.debug("Saved %d records to %s", len(items), spec.storage_key)
        for observer in self._observers:
            observer(name, list(items))

    def get(self, name: str) -> list:
        self._spec(name)
        return list(self._collections[name])

    def replace(self, name: str, items: list) -> None:
        """Swap in a new snapshot of a collection and persist it"""
        self._spec(name)
        previous = self._collections[name]
        self._collections[name] = list(items)
        try:
            self.save(name)
        except Exception:
            # Memory must not run ahead of what was persisted
            logger.error("Failed to save %s, keeping previous snapshot", name)
            self._collections[name] = previous
            raise

    def subscribe(self, observer: Observer) -> None:
        self._observers.append(observer)

    @property
    def events(self) -> List[Event]:
        return self.get(EVENTS)

    @property
    def resources(self) -> List[Resource]:
        return self.get(RESOURCES)

    @property
    def theme_plans(self) -> List[ThemePlan]:
        return self.get(THEME_PLANS)

    @property
    def locations(self) -> List[LocationPartner]:
        return self.get(LOCATIONS)

    @property
    def makeup_artists(self) -> List[MakeupArtist]:
        return self.get(MAKEUP_ARTISTS)
