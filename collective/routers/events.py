from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from collective.dependencies import (
    get_description_service,
    get_entity_store,
    get_view_states,
)
from collective.errors import NotFoundError
from collective.schemas.event import (
    DescriptionOut,
    DescriptionRequest,
    Event,
    EventCreate,
)
from collective.services.description_service import DescriptionService
from collective.services.entity_store import EntityStore
from collective.services.event_service import EventService
from collective.services.view_state import ViewStateRegistry

router = APIRouter(prefix="/events", tags=["events"])


def get_event_service(
    store: EntityStore = Depends(get_entity_store),
    views: ViewStateRegistry = Depends(get_view_states),
):
    """Dependency to get EventService instance"""
    return EventService(store, views)


@router.get("/", response_model=List[Event])
async def list_events(event_service: EventService = Depends(get_event_service)):
    return event_service.list_events()


@router.post("/", response_model=Event, status_code=201)
async def create_event(
    event_data: EventCreate, event_service: EventService = Depends(get_event_service)
):
    """Publish a new event from the event board"""
    try:
        return event_service.create_event(event_data)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/describe", response_model=DescriptionOut)
async def suggest_description(
    request: DescriptionRequest,
    description_service: DescriptionService = Depends(get_description_service),
):
    """Draft an event description from its title, location and style notes"""
    text = await description_service.generate(
        request.title, request.location, request.styleNotes
    )
    return DescriptionOut(description=text)


@router.get("/{event_id}", response_model=Event)
async def get_event(
    event_id: str, event_service: EventService = Depends(get_event_service)
):
    try:
        return event_service.get_event(event_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: str, event_service: EventService = Depends(get_event_service)
):
    """Delete an event; unknown ids are ignored"""
    try:
        event_service.delete_event(event_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
