from typing import List, Optional

from pydantic import BaseModel, Field


class LocationPartnerCreate(BaseModel):
    name: str = Field(min_length=1)
    address: str = ""
    style: str = ""
    contact: str = ""
    cost: str = ""
    requirements: str = ""
    notes: str = ""
    imageUrl: Optional[str] = None
    images: List[str] = []


class LocationPartner(LocationPartnerCreate):
    id: str


class MakeupArtistCreate(BaseModel):
    name: str = Field(min_length=1)
    contact: str = ""
    baseLocation: str = ""
    rates: str = ""
    returnRequirements: str = ""
    portfolioImages: List[str] = []
    notes: Optional[str] = None


class MakeupArtist(MakeupArtistCreate):
    id: str
