from typing import List, Optional

from pydantic import BaseModel

from .event import Event

WEEKDAY_HEADERS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


class DayCell(BaseModel):
    """One calendar cell; leading blanks have no day"""

    day: Optional[int] = None
    date: Optional[str] = None
    isToday: bool = False


class EventDayCell(DayCell):
    events: List[Event] = []


class BookingDayCell(DayCell):
    booked: bool = False


class EventMonthGrid(BaseModel):
    year: int
    month: int
    weekdays: List[str] = WEEKDAY_HEADERS
    cells: List[EventDayCell] = []


class BookingMonthGrid(BaseModel):
    resourceId: str
    year: int
    month: int
    weekdays: List[str] = WEEKDAY_HEADERS
    cells: List[BookingDayCell] = []
