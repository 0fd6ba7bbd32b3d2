from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class ListMode(BaseModel):
    kind: Literal["list"] = "list"


class CreatingMode(BaseModel):
    kind: Literal["creating"] = "creating"
    date: Optional[str] = None


class ViewingDetailMode(BaseModel):
    kind: Literal["viewing-detail"] = "viewing-detail"
    recordId: str


UiMode = Annotated[
    Union[ListMode, CreatingMode, ViewingDetailMode], Field(discriminator="kind")
]
