"""
Paper extraction pipeline (authenticated, bare JSON responses).

The extraction endpoints answer with the DTO itself rather than an envelope,
so results are returned exactly as parsed. For typed results pass
`ENDPOINTS[name]` to `client.call_model` with `ExtractionStatus` or
`SummarizationStatus`.
"""

from __future__ import annotations

from typing import Any, Dict

from scholarai_client.core.client import ScholarClient
from scholarai_client.core.endpoints import Endpoint, endpoint_table
from scholarai_client.core.response import ResponseMode
from scholarai_client.models import ExtractionInput

ENDPOINTS = endpoint_table(
    [
        Endpoint(
            "trigger_extraction",
            "POST",
            "/api/v1/extraction/trigger",
            mode=ResponseMode.JSON,
            authenticated=True,
        ),
        Endpoint(
            "trigger_extraction_for_paper",
            "POST",
            "/api/v1/extraction/trigger/{paperId}",
            mode=ResponseMode.JSON,
            authenticated=True,
        ),
        Endpoint(
            "get_extraction_status",
            "GET",
            "/api/v1/extraction/status/{paperId}",
            mode=ResponseMode.JSON,
            authenticated=True,
        ),
        Endpoint(
            "is_paper_extracted",
            "GET",
            "/api/v1/extraction/extracted/{paperId}",
            mode=ResponseMode.JSON,
            authenticated=True,
        ),
        Endpoint(
            "get_summarization_status",
            "GET",
            "/api/v1/papers/{paperId}/summary/status",
            mode=ResponseMode.JSON,
            authenticated=True,
        ),
    ]
)


async def trigger_extraction(
    client: ScholarClient, paper_id: str, **options: bool
) -> Dict[str, Any]:
    """
    Trigger extraction with explicit options.
    Options are the ExtractionInput flags, e.g. extract_tables=True, use_ocr=False.
    """
    body = ExtractionInput(paper_id=paper_id, **options)
    return await client.call(ENDPOINTS["trigger_extraction"], json=body.to_body())


async def trigger_extraction_for_paper(
    client: ScholarClient, paper_id: str, async_processing: bool = True
) -> Dict[str, Any]:
    """Trigger extraction with the server's default options."""
    return await client.call(
        ENDPOINTS["trigger_extraction_for_paper"],
        path_params={"paperId": paper_id},
        params={"asyncProcessing": async_processing},
    )


async def get_extraction_status(client: ScholarClient, paper_id: str) -> Dict[str, Any]:
    return await client.call(
        ENDPOINTS["get_extraction_status"], path_params={"paperId": paper_id}
    )


async def is_paper_extracted(client: ScholarClient, paper_id: str) -> bool:
    return await client.call(
        ENDPOINTS["is_paper_extracted"], path_params={"paperId": paper_id}
    )


async def get_summarization_status(
    client: ScholarClient, paper_id: str
) -> Dict[str, Any]:
    return await client.call(
        ENDPOINTS["get_summarization_status"], path_params={"paperId": paper_id}
    )
