from fastapi import APIRouter, Depends, HTTPException, Path

from collective.dependencies import calendar_day
from collective.errors import NotFoundError
from collective.routers.events import get_event_service
from collective.schemas.calendar import EventMonthGrid
from collective.schemas.event import Event, QuickAddRequest
from collective.schemas.ui import UiMode
from collective.services.event_service import EventService

router = APIRouter(prefix="/schedule", tags=["schedule"])


@router.get("/view", response_model=UiMode)
async def get_view_mode(event_service: EventService = Depends(get_event_service)):
    """Current mode of the schedule"""
    return event_service.current_mode()


@router.post("/view/close", response_model=UiMode)
async def close_view(event_service: EventService = Depends(get_event_service)):
    return event_service.close()


@router.get("/{year}/{month}", response_model=EventMonthGrid)
async def month_view(
    year: int = Path(ge=1, le=9999),
    month: int = Path(ge=1, le=12),
    event_service: EventService = Depends(get_event_service),
):
    """Events of the month grouped into Sunday-first day cells"""
    return event_service.month_view(year, month)


@router.post("/days/{day}/select", response_model=UiMode)
async def select_day(
    day: str = Depends(calendar_day),
    event_service: EventService = Depends(get_event_service),
):
    """Open the quick-add form for a day"""
    return event_service.select_day(day)


@router.post("/days/{day}/events", response_model=Event, status_code=201)
async def quick_add(
    request: QuickAddRequest,
    day: str = Depends(calendar_day),
    event_service: EventService = Depends(get_event_service),
):
    """Add an event on a day straight from the calendar"""
    try:
        return event_service.quick_add(day, request)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/events/{event_id}/select", response_model=UiMode)
async def select_event(
    event_id: str, event_service: EventService = Depends(get_event_service)
):
    """Open the detail view of a scheduled event"""
    try:
        return event_service.select_event(event_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
