from fastapi import APIRouter, File, HTTPException, UploadFile

from collective.errors import ImageEncodeError
from collective.schemas.image import ImageOut
from collective.services.image_service import encode_image

router = APIRouter(prefix="/images", tags=["images"])


@router.post("/", response_model=ImageOut, status_code=201)
async def upload_image(file: UploadFile = File(...)):
    """Encode an uploaded image as a data URL for the image lists"""
    data = await file.read()
    try:
        return ImageOut(url=encode_image(data, file.content_type))
    except ImageEncodeError as e:
        raise HTTPException(status_code=400, detail=str(e))
