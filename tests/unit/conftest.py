"""
Test fixtures for Lambda function tests.

Provides common test data and mocked AWS resources.
"""

import os
from datetime import datetime, timezone
from typing import Any, Dict, Generator

import boto3
import pytest
from moto import mock_aws

from orgadmin.utils.dynamodb import clear_all_overrides, close_tenant_connections
from tests.unit.fixtures import (
    ADMIN_ID,
    CREATOR_ID,
    DIRECT_CHAT_ID,
    EVENT_ID,
    GROUP_CHAT_ID,
    MEMBER_ID,
    ORG_ID,
    OUTSIDER_ID,
    REQUEST_ID,
    SUPERADMIN_ID,
)

# (env var, table name, hash key)
TABLE_DEFINITIONS = [
    ("USERS_TABLE_NAME", "orgadmin-users-ue1-dev", "userId"),
    ("ORGANIZATIONS_TABLE_NAME", "orgadmin-organizations-ue1-dev", "organizationId"),
    ("MEMBERSHIP_REQUESTS_TABLE_NAME", "orgadmin-membership-requests-ue1-dev", "membershipRequestId"),
    ("EVENTS_TABLE_NAME", "orgadmin-events-ue1-dev", "eventId"),
    ("GROUP_CHATS_TABLE_NAME", "orgadmin-group-chats-ue1-dev", "groupChatId"),
    ("GROUP_CHAT_MESSAGES_TABLE_NAME", "orgadmin-group-chat-messages-ue1-dev", "messageId"),
    ("DIRECT_CHATS_TABLE_NAME", "orgadmin-direct-chats-ue1-dev", "directChatId"),
    ("DIRECT_CHAT_MESSAGES_TABLE_NAME", "orgadmin-direct-chat-messages-ue1-dev", "messageId"),
]


@pytest.fixture(autouse=True)
def reset_table_access() -> Generator[None, None, None]:
    """Clear overrides and cached tenant accessors between tests."""
    clear_all_overrides()
    close_tenant_connections()
    yield
    clear_all_overrides()
    close_tenant_connections()


@pytest.fixture
def aws_credentials() -> None:
    """Set fake AWS credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
    os.environ.pop("DYNAMODB_ENDPOINT", None)
    os.environ.pop("DEFAULT_TENANT_ID", None)
    for env_name, table_name, _ in TABLE_DEFINITIONS:
        os.environ[env_name] = table_name


@pytest.fixture
def dynamodb_tables(aws_credentials: None) -> Generator[Dict[str, Any], None, None]:
    """Create all mock DynamoDB tables, keyed by env var name."""
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")
        created: Dict[str, Any] = {}
        for env_name, table_name, hash_key in TABLE_DEFINITIONS:
            created[env_name] = dynamodb.create_table(
                TableName=table_name,
                KeySchema=[{"AttributeName": hash_key, "KeyType": "HASH"}],
                AttributeDefinitions=[{"AttributeName": hash_key, "AttributeType": "S"}],
                BillingMode="PAY_PER_REQUEST",
            )
        yield created


@pytest.fixture
def users_table(dynamodb_tables: Dict[str, Any]) -> Any:
    return dynamodb_tables["USERS_TABLE_NAME"]


@pytest.fixture
def organizations_table(dynamodb_tables: Dict[str, Any]) -> Any:
    return dynamodb_tables["ORGANIZATIONS_TABLE_NAME"]


@pytest.fixture
def seeded(dynamodb_tables: Dict[str, Any]) -> Dict[str, Any]:
    """
    Seed one organization with its users, a membership request, an event and chats.

    - admin-1 administers org-1
    - creator-1 created org-1 but is not an admin
    - member-1 is a plain member who created event-1
    - outsider-1 has a pending membership request and is registered for event-1
    - super-1 is a SUPERADMIN with no role in org-1
    """
    now = datetime.now(timezone.utc).isoformat()

    organization = {
        "organizationId": ORG_ID,
        "name": "Test Org",
        "description": "An organization",
        "isPublic": True,
        "creatorId": CREATOR_ID,
        "admins": [ADMIN_ID],
        "members": [ADMIN_ID, CREATOR_ID, MEMBER_ID],
        "membershipRequests": [REQUEST_ID],
        "createdAt": now,
        "updatedAt": now,
    }
    users = [
        {
            "userId": ADMIN_ID,
            "firstName": "Ada",
            "userType": "USER",
            "joinedOrganizations": [ORG_ID],
            "adminFor": [ORG_ID],
            "eventAdmin": [EVENT_ID],
        },
        {
            "userId": CREATOR_ID,
            "firstName": "Cy",
            "userType": "USER",
            "joinedOrganizations": [ORG_ID],
            "createdOrganizations": [ORG_ID],
        },
        {
            "userId": MEMBER_ID,
            "firstName": "Mo",
            "userType": "USER",
            "joinedOrganizations": [ORG_ID, "ORG#other"],
            "createdEvents": [EVENT_ID],
            "eventAdmin": [EVENT_ID],
            "registeredEvents": [EVENT_ID, "EVENT#other"],
        },
        {
            "userId": OUTSIDER_ID,
            "firstName": "Otto",
            "userType": "USER",
            "joinedOrganizations": [],
            "membershipRequests": [REQUEST_ID],
            "registeredEvents": [EVENT_ID],
        },
        {
            "userId": SUPERADMIN_ID,
            "firstName": "Sue",
            "userType": "SUPERADMIN",
            "joinedOrganizations": [],
        },
    ]
    membership_request = {
        "membershipRequestId": REQUEST_ID,
        "userId": OUTSIDER_ID,
        "organizationId": ORG_ID,
        "createdAt": now,
    }
    event = {
        "eventId": EVENT_ID,
        "title": "Spring Meetup",
        "organizationId": ORG_ID,
        "creatorId": MEMBER_ID,
        "admins": [MEMBER_ID, ADMIN_ID],
        "registrants": [MEMBER_ID, OUTSIDER_ID],
        "status": "ACTIVE",
        "createdAt": now,
    }
    group_chat = {
        "groupChatId": GROUP_CHAT_ID,
        "title": "Organizers",
        "organizationId": ORG_ID,
        "creatorId": ADMIN_ID,
        "users": [ADMIN_ID, MEMBER_ID],
        "messages": ["MESSAGE#g1", "MESSAGE#g2"],
        "createdAt": now,
    }
    direct_chat = {
        "directChatId": DIRECT_CHAT_ID,
        "organizationId": ORG_ID,
        "creatorId": MEMBER_ID,
        "users": [MEMBER_ID, ADMIN_ID],
        "messages": ["MESSAGE#d1"],
        "createdAt": now,
    }

    dynamodb_tables["ORGANIZATIONS_TABLE_NAME"].put_item(Item=organization)
    for user in users:
        dynamodb_tables["USERS_TABLE_NAME"].put_item(Item=user)
    dynamodb_tables["MEMBERSHIP_REQUESTS_TABLE_NAME"].put_item(Item=membership_request)
    dynamodb_tables["EVENTS_TABLE_NAME"].put_item(Item=event)
    dynamodb_tables["GROUP_CHATS_TABLE_NAME"].put_item(Item=group_chat)
    dynamodb_tables["DIRECT_CHATS_TABLE_NAME"].put_item(Item=direct_chat)

    for message_id in ["MESSAGE#g1", "MESSAGE#g2", "MESSAGE#g-other"]:
        dynamodb_tables["GROUP_CHAT_MESSAGES_TABLE_NAME"].put_item(
            Item={"messageId": message_id, "groupChatId": GROUP_CHAT_ID, "senderId": ADMIN_ID, "messageContent": "hi"}
        )
    dynamodb_tables["DIRECT_CHAT_MESSAGES_TABLE_NAME"].put_item(
        Item={
            "messageId": "MESSAGE#d1",
            "directChatId": DIRECT_CHAT_ID,
            "senderId": MEMBER_ID,
            "receiverId": ADMIN_ID,
            "messageContent": "hello",
        }
    )

    return {
        "organization": organization,
        "users": {user["userId"]: user for user in users},
        "membership_request": membership_request,
        "event": event,
        "group_chat": group_chat,
        "direct_chat": direct_chat,
    }


@pytest.fixture
def lambda_context() -> Any:
    """Mock Lambda context."""

    class Context:
        function_name = "test-function"
        memory_limit_in_mb = 128
        invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-function"
        aws_request_id = "test-request-id"

    return Context()


@pytest.fixture
def appsync_event() -> Dict[str, Any]:
    """Base AppSync event structure, called by the organization admin."""
    return {
        "arguments": {},
        "identity": {
            "sub": "admin-1",
            "username": "admin",
        },
        "requestContext": {
            "requestId": "test-correlation-id",
        },
        "info": {
            "fieldName": "testField",
            "parentTypeName": "Mutation",
        },
    }
