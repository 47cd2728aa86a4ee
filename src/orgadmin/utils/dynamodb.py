"""
Centralized DynamoDB table access utilities.

Provides per-tenant table accessors with lazy initialization and test
monkeypatch support. The default tenant reads the base table names from the
environment; every other tenant gets its own set of tables suffixed with
``-tenant-<tenantId>``.
"""

import os
from typing import TYPE_CHECKING, Dict, Optional

import boto3
from botocore.exceptions import EndpointConnectionError

from .logging import get_logger

if TYPE_CHECKING:
    from mypy_boto3_dynamodb import DynamoDBServiceResource
    from mypy_boto3_dynamodb.service_resource import Table

logger = get_logger(__name__)

# Module-level cache for test overrides
_table_overrides: dict[str, Optional["Table"]] = {}

# One accessor per non-default tenant, created on first use
_tenant_accessors: Dict[str, "TableAccessor"] = {}

CONNECTION_FAILURE_CAUSES = [
    "Unstable network connection",
    "Invalid DYNAMODB_ENDPOINT",
    "DynamoDB (or LocalStack) may not be running",
    "Firewall may not allow outgoing connections to the DynamoDB endpoint",
]


def get_required_env(name: str, default: Optional[str] = None) -> str:
    """Get a required environment variable.

    Args:
        name: Environment variable name
        default: Optional default for test environments

    Returns:
        The environment variable value

    Raises:
        ValueError: If the env var is not set and no default is provided
    """
    value = os.getenv(name, default)
    if value is None:
        raise ValueError(f"Required environment variable '{name}' is not set")
    return value


def get_default_tenant_id() -> str:
    """Tenant whose tables carry the bare base names (DEFAULT_TENANT_ID, or "default")."""
    return os.getenv("DEFAULT_TENANT_ID", "default")


def _get_dynamodb() -> "DynamoDBServiceResource":
    """Get DynamoDB resource with optional endpoint override for LocalStack."""
    return boto3.resource("dynamodb", endpoint_url=os.getenv("DYNAMODB_ENDPOINT"))


class TableAccessor:
    """Access to one tenant's DynamoDB tables with environment-based naming."""

    def __init__(self, tenant_id: Optional[str] = None) -> None:
        self.tenant_id = tenant_id
        self._dynamodb: Optional["DynamoDBServiceResource"] = None

    @property
    def dynamodb(self) -> "DynamoDBServiceResource":
        """DynamoDB resource for this accessor, created on first table access."""
        if self._dynamodb is None:
            self._dynamodb = _get_dynamodb()
        return self._dynamodb

    def close(self) -> None:
        """Forget the cached resource so the next access reconnects."""
        self._dynamodb = None

    def table_name(self, env_name: str) -> str:
        """Resolve the physical table name for this tenant."""
        base_name = get_required_env(env_name)
        if self.tenant_id is None:
            return base_name
        return f"{base_name}-tenant-{self.tenant_id}"

    def _table(self, key: str, env_name: str) -> "Table":
        if override := _table_overrides.get(key):
            return override
        return self.dynamodb.Table(self.table_name(env_name))

    @property
    def users(self) -> "Table":
        """Get users table instance."""
        return self._table("users", "USERS_TABLE_NAME")

    @property
    def organizations(self) -> "Table":
        """Get organizations table instance."""
        return self._table("organizations", "ORGANIZATIONS_TABLE_NAME")

    @property
    def membership_requests(self) -> "Table":
        """Get membership requests table instance."""
        return self._table("membership_requests", "MEMBERSHIP_REQUESTS_TABLE_NAME")

    @property
    def events(self) -> "Table":
        """Get events table instance."""
        return self._table("events", "EVENTS_TABLE_NAME")

    @property
    def group_chats(self) -> "Table":
        """Get group chats table instance."""
        return self._table("group_chats", "GROUP_CHATS_TABLE_NAME")

    @property
    def group_chat_messages(self) -> "Table":
        """Get group chat messages table instance."""
        return self._table("group_chat_messages", "GROUP_CHAT_MESSAGES_TABLE_NAME")

    @property
    def direct_chats(self) -> "Table":
        """Get direct chats table instance."""
        return self._table("direct_chats", "DIRECT_CHATS_TABLE_NAME")

    @property
    def direct_chat_messages(self) -> "Table":
        """Get direct chat messages table instance."""
        return self._table("direct_chat_messages", "DIRECT_CHAT_MESSAGES_TABLE_NAME")


# Default tenant accessor for import
tables = TableAccessor()


def get_tables_for_tenant(tenant_id: Optional[str] = None) -> TableAccessor:
    """
    Get the table accessor for a tenant.

    Falls back to the default tables when the tenant ID is not provided or is
    the default tenant.
    """
    if not tenant_id or tenant_id == get_default_tenant_id():
        return tables

    if tenant_id not in _tenant_accessors:
        logger.info("Creating table accessor for tenant", tenantId=tenant_id)
        _tenant_accessors[tenant_id] = TableAccessor(tenant_id)
    return _tenant_accessors[tenant_id]


def close_tenant_connections() -> None:
    """Drop every cached tenant accessor and the default tables' connection."""
    for accessor in _tenant_accessors.values():
        accessor.close()
    _tenant_accessors.clear()
    tables.close()


def verify_connection() -> None:
    """
    Make one cheap call against DynamoDB to fail fast on a bad endpoint.

    Raises:
        EndpointConnectionError: If the endpoint cannot be reached
    """
    try:
        _get_dynamodb().meta.client.list_tables(Limit=1)
    except EndpointConnectionError as e:
        logger.error(
            "Connection to DynamoDB failed",
            error=str(e),
            endpoint=os.getenv("DYNAMODB_ENDPOINT"),
            possibleCauses=CONNECTION_FAILURE_CAUSES,
        )
        raise


# Test utilities
def override_table(table_name: str, table: Optional["Table"]) -> None:
    """Override a table for testing. Set to None to clear override."""
    _table_overrides[table_name] = table


def clear_all_overrides() -> None:
    """Clear all table overrides (call in test teardown)."""
    _table_overrides.clear()
