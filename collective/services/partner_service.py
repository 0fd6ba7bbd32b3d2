import logging
import uuid
from typing import List

from collective.schemas.partner import (
    LocationPartner,
    LocationPartnerCreate,
    MakeupArtist,
    MakeupArtistCreate,
)
from collective.services.entity_store import LOCATIONS, MAKEUP_ARTISTS, EntityStore

logger = logging.getLogger(__name__)


class LocationService:
    def __init__(self, store: EntityStore):
        self.store = store

    def list_locations(self) -> List[LocationPartner]:
        return self.store.locations

    def create_location(self, location_data: LocationPartnerCreate) -> LocationPartner:
        location = LocationPartner(id=str(uuid.uuid4()), **location_data.model_dump())
        self.store.replace(LOCATIONS, self.store.locations + [location])
        logger.info("Created location partner %s", location.id)
        return location

    def delete_location(self, location_id: str) -> None:
        locations = self.store.locations
        remaining = [loc for loc in locations if loc.id != location_id]
        if len(remaining) != len(locations):
            self.store.replace(LOCATIONS, remaining)


class MakeupArtistService:
    def __init__(self, store: EntityStore):
        self.store = store

    def list_artists(self) -> List[MakeupArtist]:
        return self.store.makeup_artists

    def create_artist(self, artist_data: MakeupArtistCreate) -> MakeupArtist:
        artist = MakeupArtist(id=str(uuid.uuid4()), **artist_data.model_dump())
        self.store.replace(MAKEUP_ARTISTS, self.store.makeup_artists + [artist])
        logger.info("Created makeup artist %s", artist.id)
        return artist

    def delete_artist(self, artist_id: str) -> None:
        artists = self.store.makeup_artists
        remaining = [a for a in artists if a.id != artist_id]
        if len(remaining) != len(artists):
            self.store.replace(MAKEUP_ARTISTS, remaining)
