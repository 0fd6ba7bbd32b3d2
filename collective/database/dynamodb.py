import logging

import boto3
from botocore.exceptions import NoCredentialsError

from collective import config

logger = logging.getLogger(__name__)


def get_db_connection(settings=None):
    """DynamoDB resource for the collection snapshot table"""
    settings = settings or config.dynamodb_settings()
    try:
        return boto3.resource("dynamodb", **settings)
    except NoCredentialsError:
        logger.error("DynamoDB credentials not available")
        return None

