"""Errors raised by the services and mapped to HTTP status codes by routers."""


class NotFoundError(Exception):
    """Raised when a record id does not exist in its collection."""

    def __init__(self, entity: str, record_id) -> None:
        super().__init__(f"{entity} not found: {record_id}")
        self.entity = entity
        self.record_id = record_id


class ImageEncodeError(ValueError):
    """Raised when an uploaded file cannot be turned into an image reference."""

    pass
