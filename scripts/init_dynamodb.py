import boto3
from botocore.exceptions import ClientError
import json
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from collective import config  # noqa: E402
from collective.services.entity_store import COLLECTIONS  # noqa: E402


def get_resource():
    # Run from the host, so default to the locally published port
    settings = config.dynamodb_settings()
    settings["endpoint_url"] = os.getenv(
        "DYNAMODB_ENDPOINT_URL", "http://localhost:8000"
    )
    return boto3.resource("dynamodb", **settings)


def create_table_if_not_exists(table_name="CollectiveApp", dynamodb=None):
    """Create the collection snapshot table if it doesn't exist"""
    dynamodb = dynamodb or get_resource()

    try:
        # Check if table exists
        table = dynamodb.Table(table_name)
        table.table_status
        print(f"Table {table_name} already exists")
        return table
    except ClientError as e:
        if e.response["Error"]["Code"] != "ResourceNotFoundException":
            raise

    # One item per collection, keyed by PK=COLLECTION#<key>, SK=SNAPSHOT
    table = dynamodb.create_table(
        TableName=table_name,
        KeySchema=[
            {"AttributeName": "PK", "KeyType": "HASH"},
            {"AttributeName": "SK", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "PK", "AttributeType": "S"},
            {"AttributeName": "SK", "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )

    # Wait for table to be ready
    print(f"Creating table {table_name}...")
    table.wait_until_exists()

    print(f"Table {table_name} created successfully")
    return table


def seed_collections(table):
    """Write the seed snapshot of every collection that has none yet"""
    for name, spec in COLLECTIONS.items():
        key = {"PK": f"COLLECTION#{spec.storage_key}", "SK": "SNAPSHOT"}
        if "Item" in table.get_item(Key=key):
            print(f"Collection {name} already stored, skipping")
            continue
        table.put_item(
            Item={
                **key,
                "collection": spec.storage_key,
                "payload": json.dumps(spec.seed(), ensure_ascii=False),
            }
        )
        print(f"Seeded collection {name}")


def delete_table(table_name="CollectiveApp", dynamodb=None):
    """Delete DynamoDB table"""
    dynamodb = dynamodb or get_resource()

    try:
        table = dynamodb.Table(table_name)
        table.delete()
        table.wait_until_not_exists()
        print(f"Table {table_name} deleted successfully")
    except ClientError as e:
        if e.response["Error"]["Code"] != "ResourceNotFoundException":
            raise
        print(f"Table {table_name} does not exist")


if __name__ == "__main__":
    table = create_table_if_not_exists(os.getenv("TABLE_NAME", "CollectiveApp"))
    if "--seed" in sys.argv:
        seed_collections(table)
