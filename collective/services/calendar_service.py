"""Calendar grouping: Sunday-first month grids with records bucketed by day."""

import calendar
from datetime import date
from typing import Callable, Dict, Iterable, List, Optional, TypeVar

from collective.schemas.calendar import (
    BookingDayCell,
    BookingMonthGrid,
    DayCell,
    EventDayCell,
    EventMonthGrid,
)
from collective.schemas.event import Event
from collective.schemas.resource import Resource

T = TypeVar("T")


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def first_weekday(year: int, month: int) -> int:
    """Weekday of the 1st, 0 = Sunday .. 6 = Saturday"""
    # monthrange counts from Monday
    return (calendar.monthrange(year, month)[0] + 1) % 7


def day_key(year: int, month: int, day: int) -> str:
    return f"{year}-{month:02}-{day:02}"


def is_today(month: int, day: int, today: Optional[date] = None) -> bool:
    """Match on day and month only; the year is not compared"""
    today = today or date.today()
    return today.day == day and today.month == month


def count_cells(year: int, month: int) -> int:
    return first_weekday(year, month) + days_in_month(year, month)


def month_cells(year: int, month: int, today: Optional[date] = None) -> List[DayCell]:
    """Leading blanks followed by one cell per day of the month"""
    cells = [DayCell() for _ in range(first_weekday(year, month))]
    for day in range(1, days_in_month(year, month) + 1):
        cells.append(
            DayCell(
                day=day,
                date=day_key(year, month, day),
                isToday=is_today(month, day, today),
            )
        )
    return cells


def group_by_day(
    year: int,
    month: int,
    records: Iterable[T],
    belongs_to: Callable[[T, str], bool],
) -> Dict[str, List[T]]:
    """Bucket records under each day key of the month.

    Records keep the order of the source collection within a bucket; records
    outside the month land in no bucket.
    """
    records = list(records)
    buckets: Dict[str, List[T]] = {}
    for day in range(1, days_in_month(year, month) + 1):
        key = day_key(year, month, day)
        buckets[key] = [record for record in records if belongs_to(record, key)]
    return buckets


def event_on_day(event: Event, key: str) -> bool:
    return event.date[:10] == key


def events_month(
    year: int, month: int, events: Iterable[Event], today: Optional[date] = None
) -> EventMonthGrid:
    buckets = group_by_day(year, month, events, event_on_day)
    cells = [
        EventDayCell(
            **cell.model_dump(),
            events=buckets[cell.date] if cell.date else [],
        )
        for cell in month_cells(year, month, today)
    ]
    return EventMonthGrid(year=year, month=month, cells=cells)


def bookings_month(
    year: int, month: int, resource: Resource, today: Optional[date] = None
) -> BookingMonthGrid:
    """Mark the days of the month on which the resource is booked"""
    buckets = group_by_day(
        year, month, [resource], lambda r, key: key in r.bookedDates
    )
    cells = [
        BookingDayCell(
            **cell.model_dump(),
            booked=bool(buckets[cell.date]) if cell.date else False,
        )
        for cell in month_cells(year, month, today)
    ]
    return BookingMonthGrid(
        resourceId=resource.id, year=year, month=month, cells=cells
    )
