import logging
import uuid
from datetime import date
from typing import List, Optional

from collective.errors import NotFoundError
from collective.schemas.calendar import EventMonthGrid
from collective.schemas.event import Event, EventCreate, EventStatus, QuickAddRequest
from collective.schemas.ui import UiMode
from collective.services import calendar_service
from collective.services.entity_store import EVENTS, EntityStore
from collective.services.view_state import SCHEDULE, ViewStateRegistry

logger = logging.getLogger(__name__)

QUICK_ADD_TIME = "09:00"
QUICK_ADD_LOCATION = "TBD"


class EventService:
    def __init__(self, store: EntityStore, views: ViewStateRegistry):
        self.store = store
        self.views = views

    def list_events(self) -> List[Event]:
        return self.store.events

    def get_event(self, event_id: str) -> Event:
        for event in self.store.events:
            if event.id == event_id:
                return event
        raise NotFoundError("Event", event_id)

    def create_event(self, event_data: EventCreate) -> Event:
        """Publish an event from the event board form.

        Required resources are recorded as given; no resource is booked or
        has its availability changed.
        """
        event = Event(id=str(uuid.uuid4()), **event_data.model_dump())
        self.store.replace(EVENTS, self.store.events + [event])
        logger.info("Created event %s (%s)", event.id, event.title)
        return event

    def quick_add(self, day: str, request: QuickAddRequest) -> Event:
        """Add an event from the schedule for ``day`` (YYYY-MM-DD) at 9am"""
        event = Event(
            id=str(uuid.uuid4()),
            title=request.theme,
            date=f"{day}T{QUICK_ADD_TIME}",
            location=QUICK_ADD_LOCATION,
            description=(
                f"Organizer: {request.organizer}\n"
                f"Expected models: {request.modelCount}"
            ),
            status=EventStatus.UPCOMING,
            organizer=request.organizer,
            modelCount=request.modelCount,
            requiredResources=[],
        )
        self.store.replace(EVENTS, self.store.events + [event])
        self.views.show_list(SCHEDULE)
        logger.info("Quick-added event %s on %s", event.id, day)
        return event

    def delete_event(self, event_id: str) -> None:
        events = self.store.events
        remaining = [e for e in events if e.id != event_id]
        if len(remaining) != len(events):
            self.store.replace(EVENTS, remaining)
            logger.info("Deleted event %s", event_id)
        self.views.clear_selection(SCHEDULE, event_id)

    def month_view(
        self, year: int, month: int, today: Optional[date] = None
    ) -> EventMonthGrid:
        return calendar_service.events_month(year, month, self.store.events, today)

    # View state

    def current_mode(self) -> UiMode:
        return self.views.get(SCHEDULE)

    def select_day(self, day: str) -> UiMode:
        return self.views.start_creating(SCHEDULE, date=day)

    def select_event(self, event_id: str) -> UiMode:
        self.get_event(event_id)
        return self.views.view_detail(SCHEDULE, event_id)

    def close(self) -> UiMode:
        return self.views.show_list(SCHEDULE)
