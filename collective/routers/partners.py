from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from collective.dependencies import get_entity_store
from collective.schemas.partner import (
    LocationPartner,
    LocationPartnerCreate,
    MakeupArtist,
    MakeupArtistCreate,
)
from collective.services.entity_store import EntityStore
from collective.services.partner_service import LocationService, MakeupArtistService

router = APIRouter(tags=["partners"])


def get_location_service(store: EntityStore = Depends(get_entity_store)):
    """Dependency to get LocationService instance"""
    return LocationService(store)


def get_artist_service(store: EntityStore = Depends(get_entity_store)):
    """Dependency to get MakeupArtistService instance"""
    return MakeupArtistService(store)


@router.get("/locations/", response_model=List[LocationPartner])
async def list_locations(
    location_service: LocationService = Depends(get_location_service),
):
    return location_service.list_locations()


@router.post("/locations/", response_model=LocationPartner, status_code=201)
async def create_location(
    location_data: LocationPartnerCreate,
    location_service: LocationService = Depends(get_location_service),
):
    """Register a partner location"""
    try:
        return location_service.create_location(location_data)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/locations/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_location(
    location_id: str,
    location_service: LocationService = Depends(get_location_service),
):
    try:
        location_service.delete_location(location_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/makeup-artists/", response_model=List[MakeupArtist])
async def list_artists(
    artist_service: MakeupArtistService = Depends(get_artist_service),
):
    return artist_service.list_artists()


@router.post("/makeup-artists/", response_model=MakeupArtist, status_code=201)
async def create_artist(
    artist_data: MakeupArtistCreate,
    artist_service: MakeupArtistService = Depends(get_artist_service),
):
    """Register a partner makeup artist"""
    try:
        return artist_service.create_artist(artist_data)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete(
    "/makeup-artists/{artist_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def delete_artist(
    artist_id: str,
    artist_service: MakeupArtistService = Depends(get_artist_service),
):
    try:
        artist_service.delete_artist(artist_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
