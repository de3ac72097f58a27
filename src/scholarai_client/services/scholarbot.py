"""
ScholarBot chat endpoint.

Responses are normalized in RAW mode: an enveloped body yields its `data`,
anything else is returned as parsed.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from scholarai_client.core.client import ScholarClient
from scholarai_client.core.endpoints import Endpoint, endpoint_table
from scholarai_client.core.observability import log_event
from scholarai_client.core.response import ResponseMode, unwrap_data
from scholarai_client.models import ScholarBotInput

log = logging.getLogger("scholarai_client.services.scholarbot")

HEALTHY_STATUS = "UP"

ENDPOINTS = endpoint_table(
    [
        Endpoint(
            "send_message",
            "POST",
            "/api/chat/message",
            mode=ResponseMode.RAW,
            authenticated=True,
        ),
        Endpoint("chat_health", "GET", "/api/chat/health", mode=ResponseMode.RAW),
        Endpoint("health_status", "GET", "/api/chat/health", mode=ResponseMode.JSON),
    ]
)


async def send_message(
    client: ScholarClient, message: str, user_id: Optional[str] = None
) -> Any:
    """
    Send a chat message on behalf of a user.
    Falls back to the credential provider's user id; raises AuthenticationError
    before any request when neither is available.
    """
    body = ScholarBotInput(message=message, user_id=client.user_id(user_id))
    return await client.call(ENDPOINTS["send_message"], json=body.to_body())


async def check_health(client: ScholarClient) -> bool:
    """
    True only when the bot reports status UP. Never raises.
    The top-level status wins; an enveloped body is checked on its `data`.
    """
    try:
        payload = await client.call(ENDPOINTS["health_status"])
    except Exception as exc:
        log_event(
            "scholarbot.health_check_failed",
            log,
            level=logging.WARNING,
            endpoint="health_status",
            error=f"{type(exc).__name__}: {exc}",
        )
        return False
    if isinstance(payload, dict) and "status" not in payload:
        payload = unwrap_data(payload)
    return isinstance(payload, dict) and payload.get("status") == HEALTHY_STATUS


async def get_health_details(client: ScholarClient) -> Dict[str, Any]:
    return await client.call(ENDPOINTS["chat_health"])
