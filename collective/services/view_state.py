"""Per-view UI mode: list, creating or viewing one record's detail."""

import logging
from typing import Dict, Optional

from collective.schemas.ui import CreatingMode, ListMode, UiMode, ViewingDetailMode

logger = logging.getLogger(__name__)

RESOURCE_LIBRARY = "resources"
SCHEDULE = "schedule"


class ViewStateRegistry:
    def __init__(self):
        self._modes: Dict[str, UiMode] = {}

    def get(self, view: str) -> UiMode:
        return self._modes.get(view, ListMode())

    def show_list(self, view: str) -> UiMode:
        self._modes[view] = ListMode()
        return self._modes[view]

    def start_creating(self, view: str, date: Optional[str] = None) -> UiMode:
        self._modes[view] = CreatingMode(date=date)
        return self._modes[view]

    def view_detail(self, view: str, record_id: str) -> UiMode:
        self._modes[view] = ViewingDetailMode(recordId=record_id)
        return self._modes[view]

    def selected_id(self, view: str) -> Optional[str]:
        mode = self.get(view)
        if isinstance(mode, ViewingDetailMode):
            return mode.recordId
        return None

    def clear_selection(self, view: str, record_id: str) -> None:
        """Return to the list if ``record_id`` is the record under detail"""
        if self.selected_id(view) == record_id:
            logger.debug("Clearing %s selection of deleted record %s", view, record_id)
            self.show_list(view)
