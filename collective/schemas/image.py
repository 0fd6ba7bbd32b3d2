from pydantic import BaseModel


class ImageOut(BaseModel):
    """Displayable reference to an uploaded image"""

    url: str
