from __future__ import annotations

from typing import Any, Dict, Optional

from scholarai_client.core.client import ScholarClient
from scholarai_client.core.endpoints import Endpoint, endpoint_table
from scholarai_client.core.response import ResponseMode


def _summary_endpoint(name: str, method: str, suffix: str = "") -> Endpoint:
    return Endpoint(
        name,
        method,
        "/api/v1/papers/{paperId}/summary" + suffix,
        mode=ResponseMode.JSON,
        authenticated=True,
    )


ENDPOINTS = endpoint_table(
    [
        _summary_endpoint("generate_summary", "POST", "/generate"),
        _summary_endpoint("regenerate_summary", "POST", "/regenerate"),
        _summary_endpoint("get_summary", "GET"),
        _summary_endpoint("update_validation_status", "PATCH", "/validation"),
    ]
)


async def generate_summary(client: ScholarClient, paper_id: str) -> Dict[str, Any]:
    return await client.call(
        ENDPOINTS["generate_summary"], path_params={"paperId": paper_id}
    )


async def regenerate_summary(client: ScholarClient, paper_id: str) -> Dict[str, Any]:
    return await client.call(
        ENDPOINTS["regenerate_summary"], path_params={"paperId": paper_id}
    )


async def get_summary(client: ScholarClient, paper_id: str) -> Dict[str, Any]:
    return await client.call(ENDPOINTS["get_summary"], path_params={"paperId": paper_id})


async def update_validation_status(
    client: ScholarClient,
    paper_id: str,
    status: str,
    notes: Optional[str] = None,
) -> Dict[str, Any]:
    """Record a reviewer verdict on a summary; notes are sent only when non-empty."""
    params = {"status": status}
    if notes:
        params["notes"] = notes
    return await client.call(
        ENDPOINTS["update_validation_status"],
        path_params={"paperId": paper_id},
        params=params,
    )
