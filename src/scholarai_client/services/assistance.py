"""AI writing assistance on the project service (envelope responses)."""

from __future__ import annotations

from typing import Any, Dict, Optional

from scholarai_client.core.client import ScholarClient
from scholarai_client.core.endpoints import Endpoint, endpoint_table
from scholarai_client.models import AIChatInput, ContentInput

ENDPOINTS = endpoint_table(
    [
        Endpoint("process_chat_request", "POST", "/api/ai-assistance/chat"),
        Endpoint("review_document", "POST", "/api/ai-assistance/review"),
        Endpoint("generate_suggestions", "POST", "/api/ai-assistance/suggestions"),
        Endpoint("check_compliance", "POST", "/api/ai-assistance/compliance"),
        Endpoint(
            "validate_citations", "POST", "/api/ai-assistance/citations/validate"
        ),
        Endpoint("generate_corrections", "POST", "/api/ai-assistance/corrections"),
    ]
)


async def process_chat_request(
    client: ScholarClient,
    user_request: str,
    *,
    selected_text: Optional[str] = None,
    full_document: Optional[str] = None,
) -> Dict[str, Any]:
    body = AIChatInput(
        user_request=user_request,
        selected_text=selected_text,
        full_document=full_document,
    )
    return await client.call(ENDPOINTS["process_chat_request"], json=body.to_body())


async def review_document(client: ScholarClient, content: str) -> Dict[str, Any]:
    body = ContentInput(content=content)
    return await client.call(ENDPOINTS["review_document"], json=body.to_body())


async def generate_suggestions(
    client: ScholarClient, content: str, context: Optional[str] = None
) -> Dict[str, Any]:
    body = ContentInput(content=content, context=context)
    return await client.call(ENDPOINTS["generate_suggestions"], json=body.to_body())


async def check_compliance(
    client: ScholarClient, content: str, venue: Optional[str] = None
) -> Dict[str, Any]:
    body = ContentInput(content=content, venue=venue)
    return await client.call(ENDPOINTS["check_compliance"], json=body.to_body())


async def validate_citations(client: ScholarClient, content: str) -> Dict[str, Any]:
    body = ContentInput(content=content)
    return await client.call(ENDPOINTS["validate_citations"], json=body.to_body())


async def generate_corrections(client: ScholarClient, content: str) -> Dict[str, Any]:
    body = ContentInput(content=content)
    return await client.call(ENDPOINTS["generate_corrections"], json=body.to_body())
