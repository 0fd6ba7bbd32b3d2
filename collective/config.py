import logging
import os
from typing import Optional

DEFAULT_DATA_DIR = "./data"
DEFAULT_TABLE_NAME = "CollectiveApp"
DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_DESCRIPTION_TIMEOUT = 30.0  # seconds
DEFAULT_DYNAMODB_ENDPOINT_URL = "http://dynamodb-local:8000"
DEFAULT_AWS_REGION = "us-east-1"


def storage_backend() -> str:
    return os.getenv("STORAGE_BACKEND", "file").lower()


def data_dir() -> str:
    return os.getenv("DATA_DIR", DEFAULT_DATA_DIR)


def table_name() -> str:
    return os.getenv("TABLE_NAME", DEFAULT_TABLE_NAME)


def dynamodb_settings() -> dict:
    """Keyword arguments for boto3.resource("dynamodb", ...)"""
    return {
        "endpoint_url": os.getenv(
            "DYNAMODB_ENDPOINT_URL", DEFAULT_DYNAMODB_ENDPOINT_URL
        ),
        "region_name": os.getenv("AWS_DEFAULT_REGION", DEFAULT_AWS_REGION),
        "aws_access_key_id": os.getenv("AWS_ACCESS_KEY_ID", "fake"),
        "aws_secret_access_key": os.getenv("AWS_SECRET_ACCESS_KEY", "fake"),
    }


def gemini_api_key() -> str:
    return os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", "")


def gemini_model() -> str:
    return os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL)


def description_timeout() -> float:
    return float(os.getenv("DESCRIPTION_TIMEOUT", DEFAULT_DESCRIPTION_TIMEOUT))


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure root logging once at application start"""
    level = level or os.getenv("LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return logging.getLogger("collective")
