import logging
import uuid
from typing import List

from collective.errors import NotFoundError
from collective.schemas.theme import ThemeItem, ThemeItemCreate, ThemePlan
from collective.services.entity_store import THEME_PLANS, EntityStore

logger = logging.getLogger(__name__)

MONTHS = range(1, 13)


class ThemeService:
    """Monthly theme recommendations; at most one plan per month."""

    def __init__(self, store: EntityStore):
        self.store = store

    def list_plans(self) -> List[ThemePlan]:
        """All twelve months, empty where no plan exists yet"""
        return [self.get_plan(month) for month in MONTHS]

    def get_plan(self, month: int) -> ThemePlan:
        for plan in self.store.theme_plans:
            if plan.month == month:
                return plan
        return ThemePlan(month=month, themes=[])

    def _save_plan(self, updated: ThemePlan) -> None:
        plans = self.store.theme_plans
        if any(p.month == updated.month for p in plans):
            plans = [updated if p.month == updated.month else p for p in plans]
        else:
            plans.append(updated)
        self.store.replace(THEME_PLANS, plans)

    def add_theme(self, month: int, theme_data: ThemeItemCreate) -> ThemeItem:
        plan = self.get_plan(month)
        theme = ThemeItem(id=str(uuid.uuid4()), **theme_data.model_dump())
        self._save_plan(plan.model_copy(update={"themes": plan.themes + [theme]}))
        logger.info("Added theme %s to month %d", theme.id, month)
        return theme

    def update_theme(
        self, month: int, theme_id: str, theme_data: ThemeItemCreate
    ) -> ThemeItem:
        plan = self.get_plan(month)
        if not any(t.id == theme_id for t in plan.themes):
            raise NotFoundError("Theme", theme_id)

        theme = ThemeItem(id=theme_id, **theme_data.model_dump())
        themes = [theme if t.id == theme_id else t for t in plan.themes]
        self._save_plan(plan.model_copy(update={"themes": themes}))
        return theme

    def delete_theme(self, month: int, theme_id: str) -> None:
        plan = self.get_plan(month)
        themes = [t for t in plan.themes if t.id != theme_id]
        if len(themes) != len(plan.themes):
            self._save_plan(plan.model_copy(update={"themes": themes}))
            logger.info("Deleted theme %s from month %d", theme_id, month)
