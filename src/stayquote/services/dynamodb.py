"""Thin boto3 wrapper over the quote engine's DynamoDB tables.

Table names are ``{prefix}-{table}``. The prefix comes from
DYNAMODB_TABLE_PREFIX when set, otherwise ``stayquote-{ENVIRONMENT}``.
"""

import os
from typing import Any

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

_service: "DynamoDBService | None" = None


def get_dynamodb_service(environment: str | None = None) -> "DynamoDBService":
    """Shared service instance, created on first use.

    Args:
        environment: Environment name, honoured only by the creating call

    Returns:
        The process-wide DynamoDBService
    """
    global _service
    if _service is None:
        _service = DynamoDBService(environment)
    return _service


def reset_dynamodb_service() -> None:
    """Drop the shared instance so the next call builds a fresh one.

    Tests call this so the service is created inside their mock_aws context.
    """
    global _service
    _service = None


class DynamoDBService:
    """Keyed reads, guarded writes and prefix queries against prefixed tables."""

    def __init__(self, environment: str | None = None) -> None:
        """Initialize DynamoDB service.

        Args:
            environment: dev/prod; falls back to the ENVIRONMENT variable
        """
        self.environment = environment or os.getenv("ENVIRONMENT", "dev")
        self.name_prefix = os.getenv("DYNAMODB_TABLE_PREFIX") or f"stayquote-{self.environment}"
        self._resource = boto3.resource("dynamodb")

    def table_name(self, table: str) -> str:
        """Physical name of a logical table."""
        return f"{self.name_prefix}-{table}"

    def _table(self, table: str) -> Any:
        return self._resource.Table(self.table_name(table))

    def get(self, table: str, **key: str) -> dict[str, Any] | None:
        """Fetch one item by its full primary key, or None."""
        return self._table(table).get_item(Key=key).get("Item")

    def put(self, table: str, item: dict[str, Any], *, unless_exists: str | None = None) -> bool:
        """Write an item.

        Args:
            table: Logical table name
            item: Attributes to store
            unless_exists: Key attribute; when given, an existing item with
                the same key is left untouched

        Returns:
            False when the write was refused because the item exists
        """
        request: dict[str, Any] = {"Item": item}
        if unless_exists:
            request["ConditionExpression"] = f"attribute_not_exists({unless_exists})"

        try:
            self._table(table).put_item(**request)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                return False
            raise
        return True

    def query_prefix(
        self,
        table: str,
        partition: tuple[str, str],
        sort_prefix: tuple[str, str],
    ) -> list[dict[str, Any]]:
        """All items of a partition whose sort key starts with a prefix.

        Items come back in ascending sort-key order; every result page is
        read.

        Args:
            table: Logical table name
            partition: (attribute, value) of the partition key
            sort_prefix: (attribute, prefix) of the sort key
        """
        condition = Key(partition[0]).eq(partition[1]) & Key(sort_prefix[0]).begins_with(
            sort_prefix[1]
        )
        request: dict[str, Any] = {"KeyConditionExpression": condition}
        items: list[dict[str, Any]] = []
        while True:
            page = self._table(table).query(**request)
            items.extend(page.get("Items", []))
            if "LastEvaluatedKey" not in page:
                return items
            request["ExclusiveStartKey"] = page["LastEvaluatedKey"]
