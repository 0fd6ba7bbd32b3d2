from typing import List

from pydantic import BaseModel, Field


class ThemeItemCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = ""
    recommendLocation: str = ""
    images: List[str] = []


class ThemeItem(ThemeItemCreate):
    id: str


class ThemePlan(BaseModel):
    month: int = Field(ge=1, le=12)
    themes: List[ThemeItem] = []
