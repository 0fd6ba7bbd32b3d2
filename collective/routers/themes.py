from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from collective.dependencies import get_entity_store
from collective.errors import NotFoundError
from collective.schemas.theme import ThemeItem, ThemeItemCreate, ThemePlan
from collective.services.entity_store import EntityStore
from collective.services.theme_service import ThemeService

router = APIRouter(prefix="/themes", tags=["themes"])


def get_theme_service(store: EntityStore = Depends(get_entity_store)):
    """Dependency to get ThemeService instance"""
    return ThemeService(store)


@router.get("/", response_model=List[ThemePlan])
async def list_plans(theme_service: ThemeService = Depends(get_theme_service)):
    """Theme plans for all twelve months"""
    return theme_service.list_plans()


@router.get("/{month}", response_model=ThemePlan)
async def get_plan(
    month: int = Path(ge=1, le=12),
    theme_service: ThemeService = Depends(get_theme_service),
):
    return theme_service.get_plan(month)


@router.post("/{month}", response_model=ThemeItem, status_code=201)
async def add_theme(
    theme_data: ThemeItemCreate,
    month: int = Path(ge=1, le=12),
    theme_service: ThemeService = Depends(get_theme_service),
):
    try:
        return theme_service.add_theme(month, theme_data)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/{month}/{theme_id}", response_model=ThemeItem)
async def update_theme(
    theme_data: ThemeItemCreate,
    theme_id: str,
    month: int = Path(ge=1, le=12),
    theme_service: ThemeService = Depends(get_theme_service),
):
    try:
        return theme_service.update_theme(month, theme_id, theme_data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{month}/{theme_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_theme(
    theme_id: str,
    month: int = Path(ge=1, le=12),
    theme_service: ThemeService = Depends(get_theme_service),
):
    try:
        theme_service.delete_theme(month, theme_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
