from .resource import (
    ResourceCategory,
    DisplayAspect,
    ResourceCreate,
    Resource,
    ResourceOut,
    LocationUpdate,
    QuantityUpdate,
)
from .event import (
    EventStatus,
    RequiredResource,
    EventCreate,
    Event,
    QuickAddRequest,
    DescriptionRequest,
    DescriptionOut,
)
from .partner import (
    LocationPartnerCreate,
    LocationPartner,
    MakeupArtistCreate,
    MakeupArtist,
)
from .theme import ThemeItemCreate, ThemeItem, ThemePlan
from .calendar import (
    DayCell,
    EventDayCell,
    BookingDayCell,
    EventMonthGrid,
    BookingMonthGrid,
)
from .ui import ListMode, CreatingMode, ViewingDetailMode, UiMode
from .image import ImageOut

__all__ = [
    "ResourceCategory",
    "DisplayAspect",
    "ResourceCreate",
    "Resource",
    "ResourceOut",
    "LocationUpdate",
    "QuantityUpdate",
    "EventStatus",
    "RequiredResource",
    "EventCreate",
    "Event",
    "QuickAddRequest",
    "DescriptionRequest",
    "DescriptionOut",
    "LocationPartnerCreate",
    "LocationPartner",
    "MakeupArtistCreate",
    "MakeupArtist",
    "ThemeItemCreate",
    "ThemeItem",
    "ThemePlan",
    "DayCell",
    "EventDayCell",
    "BookingDayCell",
    "EventMonthGrid",
    "BookingMonthGrid",
    "ListMode",
    "CreatingMode",
    "ViewingDetailMode",
    "UiMode",
    "ImageOut",
]
