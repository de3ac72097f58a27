from __future__ import annotations

from typing import Any, Dict, List, Optional

from scholarai_client.core.client import ScholarClient
from scholarai_client.core.endpoints import Endpoint, endpoint_table
from scholarai_client.core.response import ResponseMode
from scholarai_client.models import LibraryInput, UploadedPaperInput


def _library_endpoint(name: str, suffix: str = "") -> Endpoint:
    return Endpoint(
        name,
        "POST",
        "/api/v1/library/project/{projectId}" + suffix,
        mode=ResponseMode.RAW,
        authenticated=True,
    )


ENDPOINTS = endpoint_table(
    [
        _library_endpoint("get_project_library"),
        _library_endpoint("upload_paper", "/papers"),
        _library_endpoint("get_latest_project_papers", "/latest"),
        _library_endpoint("get_project_library_stats", "/stats"),
    ]
)


async def _library_call(
    client: ScholarClient, name: str, project_id: str, user_id: Optional[str]
) -> Any:
    body = LibraryInput(user_id=client.user_id(user_id), project_id=project_id)
    return await client.call(
        ENDPOINTS[name], path_params={"projectId": project_id}, json=body.to_body()
    )


async def get_project_library(
    client: ScholarClient, project_id: str, user_id: Optional[str] = None
) -> Dict[str, Any]:
    """Library stats plus the list of papers collected for a project."""
    return await _library_call(client, "get_project_library", project_id, user_id)


async def get_latest_project_papers(
    client: ScholarClient, project_id: str, user_id: Optional[str] = None
) -> List[Dict[str, Any]]:
    return await _library_call(client, "get_latest_project_papers", project_id, user_id)


async def get_project_library_stats(
    client: ScholarClient, project_id: str, user_id: Optional[str] = None
) -> Dict[str, Any]:
    return await _library_call(client, "get_project_library_stats", project_id, user_id)


async def upload_paper(
    client: ScholarClient, project_id: str, paper: UploadedPaperInput | Dict[str, Any]
) -> Dict[str, Any]:
    """
    Add a user-uploaded paper to the project library.
    `paper` may be an UploadedPaperInput or a dict in either naming style;
    its projectId is forced to `project_id`.
    """
    if isinstance(paper, dict):
        data = {k: v for k, v in paper.items() if k not in ("projectId", "project_id")}
        data["project_id"] = project_id
        paper = UploadedPaperInput.model_validate(data)
    elif paper.project_id != project_id:
        paper = paper.model_copy(update={"project_id": project_id})
    return await client.call(
        ENDPOINTS["upload_paper"],
        path_params={"projectId": project_id},
        json=paper.to_body(),
    )
