"""LaTeX document management on the project service (envelope responses)."""

from __future__ import annotations

from typing import Any, Dict, Optional

from scholarai_client.core.client import ScholarClient
from scholarai_client.core.endpoints import Endpoint, endpoint_table
from scholarai_client.core.response import ResponseMode
from scholarai_client.models import (
    CompileLatexInput,
    CreateDocumentInput,
    GeneratePdfInput,
    UpdateDocumentInput,
)

ENDPOINTS = endpoint_table(
    [
        Endpoint("create_document", "POST", "/api/documents"),
        Endpoint(
            "create_document_with_name", "POST", "/api/documents/create-with-name"
        ),
        Endpoint(
            "get_documents_by_project", "GET", "/api/documents/project/{projectId}"
        ),
        Endpoint("get_document", "GET", "/api/documents/{documentId}"),
        Endpoint("update_document", "PUT", "/api/documents"),
        Endpoint("delete_document", "DELETE", "/api/documents/{documentId}"),
        Endpoint("compile_latex", "POST", "/api/documents/compile"),
        Endpoint(
            "generate_pdf",
            "POST",
            "/api/documents/generate-pdf",
            mode=ResponseMode.BLOB,
        ),
    ]
)


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


async def create_document_with_name(
    client: ScholarClient, project_id: str, file_name: str
) -> Dict[str, Any]:
    return await client.call(
        ENDPOINTS["create_document_with_name"],
        params={"projectId": project_id, "fileName": file_name},
    )


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
    client: ScholarClient,
    document_id: str,
    *,
    title: Optional[str] = None,
    content: Optional[str] = None,
) -> Dict[str, Any]:
    body = UpdateDocumentInput(document_id=document_id, title=title, content=content)
    return await client.call(ENDPOINTS["update_document"], json=body.to_body())


async def delete_document(client: ScholarClient, document_id: str) -> Dict[str, Any]:
    return await client.call(
        ENDPOINTS["delete_document"], path_params={"documentId": document_id}
    )


async def compile_latex(client: ScholarClient, latex_content: str) -> Dict[str, Any]:
    """Compile LaTeX source; the envelope's data holds the rendered output."""
    body = CompileLatexInput(latex_content=latex_content)
    return await client.call(ENDPOINTS["compile_latex"], json=body.to_body())


async def generate_pdf(
    client: ScholarClient, latex_content: str, *, filename: Optional[str] = None
) -> bytes:
    """Render LaTeX to PDF and return the raw bytes."""
    body = GeneratePdfInput(latex_content=latex_content, filename=filename)
    return await client.call(ENDPOINTS["generate_pdf"], json=body.to_body())
