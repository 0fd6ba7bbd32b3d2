"""Availability ledger for physical resources.

Occupancy is tracked per calendar day for the resource as a whole, not per
unit: a resource with three units booked on a day looks the same as one with
a single unit out. ``availableQuantity`` is set independently and is never
recomputed from ``bookedDates``.

All functions are pure and return a new ``Resource``.
"""

import logging
import uuid
from typing import List, Optional

from collective.schemas.resource import Resource, ResourceCategory, ResourceCreate

logger = logging.getLogger(__name__)


def new_resource(resource_data: ResourceCreate, resource_id: Optional[str] = None) -> Resource:
    """Build a fresh resource with every unit available and no booked dates"""
    item_code = (
        resource_data.itemCode
        if resource_data.category == ResourceCategory.COSTUME
        else None
    )
    return Resource(
        id=resource_id or str(uuid.uuid4()),
        name=resource_data.name,
        category=resource_data.category,
        description=resource_data.description,
        location=resource_data.location,
        itemCode=item_code,
        imageUrl=resource_data.imageUrl,
        images=list(resource_data.images),
        displayAspect=resource_data.displayAspect,
        totalQuantity=resource_data.totalQuantity,
        availableQuantity=resource_data.totalQuantity,
        bookedDates=set(),
    )


def toggle_booking(resource: Resource, date: str) -> Resource:
    """Flip membership of ``date`` (YYYY-MM-DD) in the booked dates"""
    booked_dates = set(resource.bookedDates)
    if date in booked_dates:
        booked_dates.remove(date)
    else:
        booked_dates.add(date)
    return resource.model_copy(update={"bookedDates": booked_dates})


def is_booked(resource: Resource, date: str) -> bool:
    return date in resource.bookedDates


def set_quantity(resource: Resource, total: int) -> Resource:
    """Set the unit count; totals below one leave the resource unchanged"""
    if total < 1:
        logger.warning(
            "Refusing quantity %s for resource %s: total must be at least 1",
            total,
            resource.id,
        )
        return resource
    return resource.model_copy(
        update={
            "totalQuantity": total,
            "availableQuantity": min(resource.availableQuantity, total),
        }
    )


def set_available(resource: Resource, available: int) -> Resource:
    """Set the available count, clamped to [0, totalQuantity]"""
    clamped = max(0, min(available, resource.totalQuantity))
    if clamped != available:
        logger.warning(
            "Clamped available quantity %s to %s for resource %s",
            available,
            clamped,
            resource.id,
        )
    return resource.model_copy(update={"availableQuantity": clamped})


def update_location(resource: Resource, location: str) -> Resource:
    return resource.model_copy(update={"location": location})


def is_available(resource: Resource) -> bool:
    return resource.availableQuantity > 0


def replace_resource(resources: List[Resource], updated: Resource) -> List[Resource]:
    return [updated if r.id == updated.id else r for r in resources]


def remove_resource(resources: List[Resource], resource_id: str) -> List[Resource]:
    """Drop a resource by id; unknown ids leave the list as it was"""
    return [r for r in resources if r.id != resource_id]
