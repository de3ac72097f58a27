import json

import pytest
import respx
from httpx import Response
from scholarai_client.core.auth import StaticCredentialProvider
from scholarai_client.core.client import ScholarClient
from scholarai_client.core.config import ServiceConfig
from scholarai_client.core.errors import RequestError
from scholarai_client.services import research

BASE = "http://research.test:8083/api"

PROJECT = {
    "id": "proj-1",
    "userId": "user-1",
    "title": "Efficient attention",
    "description": "",
    "status": "DRAFT",
    "researchDomain": "ML",
    "createdAt": "t",
    "updatedAt": "t",
}


def _ok(data):
    return Response(
        200, json={"timestamp": "t", "status": 200, "message": "ok", "data": data}
    )


@pytest.fixture
def client():
    return ScholarClient(
        config=ServiceConfig(research_url=BASE),
        credentials=StaticCredentialProvider("tok", "user-1"),
    )


@pytest.mark.asyncio
@respx.mock
async def test_create_project_defaults_user(client):
    route = respx.post(f"{BASE}/projects").mock(return_value=_ok(PROJECT))

    async with client:
        result = await research.create_project(
            client, "Efficient attention", research_domain="ML"
        )

    assert result["data"]["id"] == "proj-1"
    request = route.calls[0].request
    assert json.loads(request.content) == {
        "userId": "user-1",
        "title": "Efficient attention",
        "researchDomain": "ML",
    }
    assert "Authorization" not in request.headers


@pytest.mark.asyncio
@respx.mock
async def test_project_reads_and_delete(client):
    respx.get(f"{BASE}/projects/user/user-1").mock(return_value=_ok([PROJECT]))
    respx.get(f"{BASE}/projects/proj-1").mock(return_value=_ok(PROJECT))
    delete_route = respx.delete(f"{BASE}/projects/proj-1").mock(
        return_value=_ok(None)
    )

    async with client:
        listed = await research.get_projects_by_user(client)
        single = await research.get_project(client, "proj-1")
        deleted = await research.delete_project(client, "proj-1")

    assert listed["data"] == [PROJECT]
    assert single["data"]["title"] == "Efficient attention"
    assert deleted["data"] is None
    assert delete_route.called


@pytest.mark.asyncio
@respx.mock
async def test_document_crud(client):
    doc = {"id": "doc-1", "projectId": "proj-1", "title": "draft", "content": ""}
    create = respx.post(f"{BASE}/documents").mock(return_value=_ok(doc))
    respx.get(f"{BASE}/documents/project/proj-1").mock(return_value=_ok([doc]))
    respx.get(f"{BASE}/documents/doc-1").mock(return_value=_ok(doc))
    update = respx.put(f"{BASE}/documents").mock(return_value=_ok(doc))
    respx.delete(f"{BASE}/documents/doc-1").mock(return_value=_ok(None))
    compile_route = respx.post(f"{BASE}/documents/doc-1/compile").mock(
        return_value=_ok("<p>compiled</p>")
    )

    async with client:
        await research.create_document(client, "proj-1", "draft", document_type="LATEX")
        assert (await research.get_documents_by_project(client, "proj-1"))["data"] == [doc]
        assert (await research.get_document(client, "doc-1"))["data"] == doc
        await research.update_document(client, "doc-1", "\\section{A}")
        await research.delete_document(client, "doc-1")
        compiled = await research.compile_document(client, "doc-1")

    assert json.loads(create.calls[0].request.content) == {
        "projectId": "proj-1",
        "title": "draft",
        "documentType": "LATEX",
    }
    assert json.loads(update.calls[0].request.content) == {
        "documentId": "doc-1",
        "content": "\\section{A}",
    }
    assert compiled["data"] == "<p>compiled</p>"
    assert compile_route.called


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "func, path, kwargs, expected_body",
    [
        (research.review_document, "review", {}, {"content": "c"}),
        (
            research.generate_suggestions,
            "suggestions",
            {"context": "intro"},
            {"content": "c", "context": "intro"},
        ),
        (
            research.check_compliance,
            "compliance",
            {"venue": "ACL"},
            {"content": "c", "venue": "ACL"},
        ),
        (research.validate_citations, "citations/validate", {}, {"content": "c"}),
        (research.generate_corrections, "corrections", {}, {"content": "c"}),
    ],
)
@respx.mock
async def test_ai_assistance(client, func, path, kwargs, expected_body):
    route = respx.post(f"{BASE}/ai-assistance/{path}").mock(return_value=_ok({"ok": 1}))

    async with client:
        result = await func(client, "c", **kwargs)

    assert result["data"] == {"ok": 1}
    assert json.loads(route.calls[0].request.content) == expected_body


@pytest.mark.asyncio
@respx.mock
async def test_research_error_message(client):
    respx.get(f"{BASE}/projects/nope").mock(
        return_value=Response(404, json={"status": 404, "message": "Project not found"})
    )

    async with client:
        with pytest.raises(RequestError) as exc:
            await research.get_project(client, "nope")

    assert str(exc.value) == "Project not found"
