"""
Ongoing research service: projects, documents and AI assistance.

This service lives on its own base URL (SCHOLARAI_ONGOING_RESEARCH_API_URL)
rather than behind the gateway, and always answers with envelopes.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from scholarai_client.core.client import ScholarClient
from scholarai_client.core.endpoints import Endpoint, Target, endpoint_table
from scholarai_client.models import (
    ContentInput,
    CreateDocumentInput,
    CreateProjectInput,
    UpdateDocumentInput,
)


def _research_endpoint(name: str, method: str, path: str) -> Endpoint:
    return Endpoint(name, method, path, service=None, target=Target.RESEARCH)


ENDPOINTS = endpoint_table(
    [
        # Projects
        _research_endpoint("create_project", "POST", "/projects"),
        _research_endpoint("get_projects_by_user", "GET", "/projects/user/{userId}"),
        _research_endpoint("get_project", "GET", "/projects/{projectId}"),
        _research_endpoint("delete_project", "DELETE", "/projects/{projectId}"),
        # Documents
        _research_endpoint("create_document", "POST", "/documents"),
        _research_endpoint(
            "get_documents_by_project", "GET", "/documents/project/{projectId}"
        ),
        _research_endpoint("get_document", "GET", "/documents/{documentId}"),
        _research_endpoint("update_document", "PUT", "/documents"),
        _research_endpoint("delete_document", "DELETE", "/documents/{documentId}"),
        _research_endpoint(
            "compile_document", "POST", "/documents/{documentId}/compile"
        ),
        # AI assistance
        _research_endpoint("review_document", "POST", "/ai-assistance/review"),
        _research_endpoint(
            "generate_suggestions", "POST", "/ai-assistance/suggestions"
        ),
        _research_endpoint("check_compliance", "POST", "/ai-assistance/compliance"),
        _research_endpoint(
            "validate_citations", "POST", "/ai-assistance/citations/validate"
        ),
        _research_endpoint(
            "generate_corrections", "POST", "/ai-assistance/corrections"
        ),
    ]
)


# --- Projects -------------------------------------------------------------- #


async def create_project(
    client: ScholarClient,
    title: str,
    *,
    user_id: Optional[str] = None,
    description: Optional[str] = None,
    research_domain: Optional[str] = None,
    status: Optional[str] = None,
) -> Dict[str, Any]:
    body = CreateProjectInput(
        user_id=client.user_id(user_id),
        title=title,
        description=description,
        research_domain=research_domain,
        status=status,
    )
    return await client.call(ENDPOINTS["create_project"], json=body.to_body())


async def get_projects_by_user(
    client: ScholarClient, user_id: Optional[str] = None
) -> Dict[str, Any]:
    return await client.call(
        ENDPOINTS["get_projects_by_user"],
        path_params={"userId": client.user_id(user_id)},
    )


async def get_project(client: ScholarClient, project_id: str) -> Dict[str, Any]:
    return await client.call(
        ENDPOINTS["get_project"], path_params={"projectId": project_id}
    )


async def delete_project(client: ScholarClient, project_id: str) -> Dict[str, Any]:
    return await client.call(
        ENDPOINTS["delete_project"], path_params={"projectId": project_id}
    )


# --- Documents ------------------------------------------------------------- #


async def create_document(
    client: ScholarClient,
    project_id: str,
    title: str,
    *,
    content: Optional[str] = None,
    document_type: Optional[str] = None,
) -> Dict[str, Any]:
    body = CreateDocumentInput(
        project_id=project_id,
        title=title,
        content=content,
        document_type=document_type,
    )
    return await client.call(ENDPOINTS["create_document"], json=body.to_body())


async def get_documents_by_project(
    client: ScholarClient, project_id: str
) -> Dict[str, Any]:
    return await client.call(
        ENDPOINTS["get_documents_by_project"], path_params={"projectId": project_id}
    )


async def get_document(client: ScholarClient, document_id: str) -> Dict[str, Any]:
    return await client.call(
        ENDPOINTS["get_document"], path_params={"documentId": document_id}
    )


async def update_document(
    client: ScholarClient, document_id: str, content: str
) -> Dict[str, Any]:
    body = UpdateDocumentInput(document_id=document_id, content=content)
    return await client.call(ENDPOINTS["update_document"], json=body.to_body())


async def delete_document(client: ScholarClient, document_id: str) -> Dict[str, Any]:
    return await client.call(
        ENDPOINTS["delete_document"], path_params={"documentId": document_id}
    )


async def compile_document(client: ScholarClient, document_id: str) -> Dict[str, Any]:
    return await client.call(
        ENDPOINTS["compile_document"], path_params={"documentId": document_id}
    )


# --- AI assistance --------------------------------------------------------- #


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
