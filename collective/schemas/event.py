import re
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

DAY_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")


class EventStatus(str, Enum):
    UPCOMING = "UPCOMING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class RequiredResource(BaseModel):
    resourceId: str
    quantity: int = Field(default=1, ge=1)


class EventBase(BaseModel):
    title: str
    date: str
    location: str
    description: str
    status: EventStatus = EventStatus.UPCOMING
    organizer: Optional[str] = None
    modelCount: Optional[int] = None
    stageManager: Optional[str] = None
    requiredResources: List[RequiredResource] = []

    @field_validator("date")
    @classmethod
    def validate_date(cls, value: str) -> str:
        """Keep the submitted text; it must parse and start with YYYY-MM-DD"""
        if not DAY_PREFIX.match(value):
            raise ValueError("date must start with YYYY-MM-DD")
        datetime.fromisoformat(value)
        return value


class EventCreate(EventBase):
    title: str = Field(min_length=1)
    location: str = Field(min_length=1)
    description: str = Field(min_length=1)


class Event(EventBase):
    id: str


class QuickAddRequest(BaseModel):
    """Schedule quick-add form for a single day"""

    theme: str = Field(min_length=1)
    organizer: str = Field(min_length=1)
    modelCount: int = Field(default=0, ge=0)


class DescriptionRequest(BaseModel):
    title: str = Field(min_length=1)
    location: str = Field(min_length=1)
    styleNotes: str = ""


class DescriptionOut(BaseModel):
    description: str
