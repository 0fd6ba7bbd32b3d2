from enum import Enum
from typing import List, Optional, Set

from pydantic import BaseModel, Field, field_serializer, model_validator


class ResourceCategory(str, Enum):
    COSTUME = "COSTUME"
    MAKEUP = "MAKEUP"
    PROP = "PROP"
    ACCESSORY = "ACCESSORY"


class DisplayAspect(str, Enum):
    """Card orientation: 16:9, 3:4 or 1:1"""

    VIDEO = "video"
    PORTRAIT = "portrait"
    SQUARE = "square"


class ResourceBase(BaseModel):
    name: str = Field(min_length=1)
    category: ResourceCategory
    description: str = ""
    location: Optional[str] = None
    itemCode: Optional[str] = None
    imageUrl: Optional[str] = None
    images: List[str] = []
    displayAspect: DisplayAspect = DisplayAspect.SQUARE


class ResourceCreate(ResourceBase):
    totalQuantity: int = Field(default=1, ge=1)


class Resource(ResourceBase):
    id: str
    totalQuantity: int = Field(ge=1)
    availableQuantity: int = Field(ge=0)
    bookedDates: Set[str] = set()

    @model_validator(mode="after")
    def check_available_within_total(self) -> "Resource":
        if self.availableQuantity > self.totalQuantity:
            raise ValueError("availableQuantity cannot exceed totalQuantity")
        return self

    @field_serializer("bookedDates")
    def serialize_booked_dates(self, booked_dates: Set[str]) -> List[str]:
        return sorted(booked_dates)


class ResourceOut(Resource):
    isAvailable: bool

    @classmethod
    def from_resource(cls, resource: Resource) -> "ResourceOut":
        return cls(
            **resource.model_dump(),
            isAvailable=resource.availableQuantity > 0,
        )


class LocationUpdate(BaseModel):
    location: str


class QuantityUpdate(BaseModel):
    totalQuantity: Optional[int] = None
    availableQuantity: Optional[int] = None
