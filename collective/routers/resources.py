from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from collective.dependencies import calendar_day, get_entity_store, get_view_states
from collective.errors import NotFoundError
from collective.schemas.calendar import BookingMonthGrid
from collective.schemas.resource import (
    LocationUpdate,
    QuantityUpdate,
    ResourceCategory,
    ResourceCreate,
    ResourceOut,
)
from collective.schemas.ui import UiMode
from collective.services.entity_store import EntityStore
from collective.services.resource_service import ResourceService
from collective.services.view_state import ViewStateRegistry

router = APIRouter(prefix="/resources", tags=["resources"])


def get_resource_service(
    store: EntityStore = Depends(get_entity_store),
    views: ViewStateRegistry = Depends(get_view_states),
):
    """Dependency to get ResourceService instance"""
    return ResourceService(store, views)


@router.get("/", response_model=List[ResourceOut])
async def list_resources(
    category: Optional[ResourceCategory] = Query(
        None, description="Only list resources of this category"
    ),
    resource_service: ResourceService = Depends(get_resource_service),
):
    """List resources with their available/borrowed badge"""
    return [
        ResourceOut.from_resource(r) for r in resource_service.list_resources(category)
    ]


@router.post("/", response_model=ResourceOut, status_code=201)
async def create_resource(
    resource_data: ResourceCreate,
    resource_service: ResourceService = Depends(get_resource_service),
):
    """Register a new resource"""
    try:
        return ResourceOut.from_resource(resource_service.create_resource(resource_data))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/view", response_model=UiMode)
async def get_view_mode(
    resource_service: ResourceService = Depends(get_resource_service),
):
    """Current mode of the resource library"""
    return resource_service.current_mode()


@router.post("/view/creating", response_model=UiMode)
async def start_creating(
    resource_service: ResourceService = Depends(get_resource_service),
):
    return resource_service.start_creating()


@router.post("/view/close", response_model=UiMode)
async def close_view(
    resource_service: ResourceService = Depends(get_resource_service),
):
    return resource_service.close()


@router.get("/{resource_id}", response_model=ResourceOut)
async def get_resource(
    resource_id: str,
    resource_service: ResourceService = Depends(get_resource_service),
):
    try:
        return ResourceOut.from_resource(resource_service.get_resource(resource_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_resource(
    resource_id: str,
    resource_service: ResourceService = Depends(get_resource_service),
):
    """Delete a resource; unknown ids are ignored"""
    try:
        resource_service.delete_resource(resource_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/{resource_id}/select", response_model=UiMode)
async def select_resource(
    resource_id: str,
    resource_service: ResourceService = Depends(get_resource_service),
):
    """Open the detail view of a resource"""
    try:
        return resource_service.select_resource(resource_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{resource_id}/bookings/{day}", response_model=ResourceOut)
async def toggle_booking(
    resource_id: str,
    day: str = Depends(calendar_day),
    resource_service: ResourceService = Depends(get_resource_service),
):
    """Book the day if it is free, release it if it is booked"""
    try:
        return ResourceOut.from_resource(
            resource_service.toggle_booking(resource_id, day)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/{resource_id}/location", response_model=ResourceOut)
async def update_location(
    resource_id: str,
    update: LocationUpdate,
    resource_service: ResourceService = Depends(get_resource_service),
):
    try:
        return ResourceOut.from_resource(
            resource_service.update_location(resource_id, update.location)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/{resource_id}/quantity", response_model=ResourceOut)
async def update_quantity(
    resource_id: str,
    update: QuantityUpdate,
    resource_service: ResourceService = Depends(get_resource_service),
):
    """Set total and/or available units; totals below one are refused"""
    try:
        resource = resource_service.get_resource(resource_id)
        if update.totalQuantity is not None:
            resource = resource_service.set_quantity(resource_id, update.totalQuantity)
        if update.availableQuantity is not None:
            resource = resource_service.set_available(
                resource_id, update.availableQuantity
            )
        return ResourceOut.from_resource(resource)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{resource_id}/calendar/{year}/{month}", response_model=BookingMonthGrid)
async def resource_calendar(
    resource_id: str,
    year: int = Path(ge=1, le=9999),
    month: int = Path(ge=1, le=12),
    resource_service: ResourceService = Depends(get_resource_service),
):
    """Booked days of one resource laid out on the month grid"""
    try:
        return resource_service.month_calendar(resource_id, year, month)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
