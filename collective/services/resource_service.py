import logging
from datetime import date
from typing import List, Optional

from collective.errors import NotFoundError
from collective.schemas.calendar import BookingMonthGrid
from collective.schemas.resource import Resource, ResourceCategory, ResourceCreate
from collective.schemas.ui import UiMode
from collective.services import calendar_service, ledger
from collective.services.entity_store import RESOURCES, EntityStore
from collective.services.view_state import RESOURCE_LIBRARY, ViewStateRegistry

logger = logging.getLogger(__name__)


class ResourceService:
    def __init__(self, store: EntityStore, views: ViewStateRegistry):
        self.store = store
        self.views = views

    def list_resources(
        self, category: Optional[ResourceCategory] = None
    ) -> List[Resource]:
        resources = self.store.resources
        if category is None:
            return resources
        return [r for r in resources if r.category == category]

    def get_resource(self, resource_id: str) -> Resource:
        for resource in self.store.resources:
            if resource.id == resource_id:
                return resource
        raise NotFoundError("Resource", resource_id)

    def create_resource(self, resource_data: ResourceCreate) -> Resource:
        """Register a new resource and close the creation form"""
        resource = ledger.new_resource(resource_data)
        self.store.replace(RESOURCES, self.store.resources + [resource])
        self.views.show_list(RESOURCE_LIBRARY)
        logger.info("Created resource %s (%s)", resource.id, resource.name)
        return resource

    def delete_resource(self, resource_id: str) -> None:
        """Remove a resource; deleting an unknown id is a no-op"""
        resources = self.store.resources
        remaining = ledger.remove_resource(resources, resource_id)
        if len(remaining) != len(resources):
            self.store.replace(RESOURCES, remaining)
            logger.info("Deleted resource %s", resource_id)
        self.views.clear_selection(RESOURCE_LIBRARY, resource_id)

    def _apply(self, updated: Resource) -> Resource:
        self.store.replace(
            RESOURCES, ledger.replace_resource(self.store.resources, updated)
        )
        return updated

    def toggle_booking(self, resource_id: str, day: str) -> Resource:
        resource = self.get_resource(resource_id)
        return self._apply(ledger.toggle_booking(resource, day))

    def update_location(self, resource_id: str, location: str) -> Resource:
        resource = self.get_resource(resource_id)
        return self._apply(ledger.update_location(resource, location))

    def set_quantity(self, resource_id: str, total: int) -> Resource:
        resource = self.get_resource(resource_id)
        updated = ledger.set_quantity(resource, total)
        if updated is resource:
            return resource
        return self._apply(updated)

    def set_available(self, resource_id: str, available: int) -> Resource:
        resource = self.get_resource(resource_id)
        return self._apply(ledger.set_available(resource, available))

    def month_calendar(
        self, resource_id: str, year: int, month: int, today: Optional[date] = None
    ) -> BookingMonthGrid:
        resource = self.get_resource(resource_id)
        return calendar_service.bookings_month(year, month, resource, today)

    # View state

    def current_mode(self) -> UiMode:
        return self.views.get(RESOURCE_LIBRARY)

    def select_resource(self, resource_id: str) -> UiMode:
        self.get_resource(resource_id)
        return self.views.view_detail(RESOURCE_LIBRARY, resource_id)

    def start_creating(self) -> UiMode:
        return self.views.start_creating(RESOURCE_LIBRARY)

    def close(self) -> UiMode:
        return self.views.show_list(RESOURCE_LIBRARY)
