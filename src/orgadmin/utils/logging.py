"""
Structured JSON logging for the mutation resolvers.

Every line printed to stdout is one JSON object carrying the request's
correlation ID plus any fields bound to the logger. Handlers build their
logger with ``request_logger`` so the tenant and the GraphQL field are bound
once per request.
"""

import json
import logging
import os
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .appsync_types import get_field_name, get_tenant_id


class StructuredLogger:
    """
    JSON logger with a correlation ID and bound context fields.

    Example:
        logger = StructuredLogger(__name__, "req-1", tenantId="acme")
        logger.bind(organizationId="ORG#1").warning("Member is an admin", userId="USER#2")
    """

    def __init__(self, name: str, correlation_id: Optional[str] = None, **context: Any) -> None:
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
        self.correlation_id = correlation_id or str(uuid.uuid4())
        self.context: Dict[str, Any] = context

    def bind(self, **fields: Any) -> "StructuredLogger":
        """Child logger that adds fields to every entry; the parent is unchanged."""
        return StructuredLogger(self.name, self.correlation_id, **{**self.context, **fields})

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        if not self.logger.isEnabledFor(getattr(logging, level)):
            return

        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "message": message,
            "correlationId": self.correlation_id,
            **self.context,
            **kwargs,
        }

        # Remove None values
        log_entry = {k: v for k, v in log_entry.items() if v is not None}

        print(json.dumps(log_entry, default=str))

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """Module-level logger for code that runs outside a single request."""
    return StructuredLogger(name)


def request_logger(name: str, event: Dict[str, Any]) -> StructuredLogger:
    """Logger for one resolver invocation, bound to its tenant and GraphQL field."""
    return StructuredLogger(
        name,
        get_correlation_id(event),
        tenantId=get_tenant_id(event),
        fieldName=get_field_name(event),
    )


def get_correlation_id(event: Dict[str, Any]) -> str:
    """
    Extract or generate correlation ID from Lambda event.

    Checks for correlation ID in:
    1. event['requestContext']['requestId'] (AppSync)
    2. event['request']['headers']['x-correlation-id']
    3. Generates new UUID if not found
    """
    if "requestId" in (event.get("requestContext") or {}):
        return str(event["requestContext"]["requestId"])

    headers = (event.get("request") or {}).get("headers") or {}
    if "x-correlation-id" in headers:
        return str(headers["x-correlation-id"])

    return str(uuid.uuid4())
