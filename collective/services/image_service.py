import base64
import logging

from collective.errors import ImageEncodeError

logger = logging.getLogger(__name__)

MAX_IMAGE_BYTES = 10 * 1024 * 1024


def encode_image(data: bytes, content_type: str) -> str:
    """Turn uploaded image bytes into a displayable data URL"""
    if not content_type or not content_type.startswith("image/"):
        raise ImageEncodeError(f"Unsupported content type: {content_type}")
    if not data:
        raise ImageEncodeError("Empty image upload")
    if len(data) > MAX_IMAGE_BYTES:
        raise ImageEncodeError(f"Image larger than {MAX_IMAGE_BYTES} bytes")

    encoded = base64.b64encode(data).decode("ascii")
    logger.debug("Encoded %d byte %s image", len(data), content_type)
    return f"data:{content_type};base64,{encoded}"
