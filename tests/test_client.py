import httpx
import pytest
import respx
from httpx import Response
from scholarai_client.core.auth import StaticCredentialProvider
from scholarai_client.core.client import ScholarClient
from scholarai_client.core.config import Environment, ServiceConfig
from scholarai_client.core.endpoints import Endpoint, Target
from scholarai_client.core.errors import (
    AuthenticationError,
    RequestError,
    ResponseValidationError,
)
from scholarai_client.core.response import ResponseMode
from scholarai_client.models import Document, Envelope

BASE = "http://localhost:8989/project-service"

GET_DOCUMENT = Endpoint("get_document", "GET", "/api/documents/{documentId}")
AUTH_STATUS = Endpoint(
    "status",
    "GET",
    "/api/v1/extraction/status/{paperId}",
    mode=ResponseMode.JSON,
    authenticated=True,
)


@pytest.fixture
def client():
    return ScholarClient(credentials=StaticCredentialProvider("tok", "user-1"))


@pytest.mark.asyncio
@respx.mock
async def test_call_returns_envelope(client):
    envelope = {"status": 200, "message": "ok", "data": {"id": "d1", "title": "T"}}
    route = respx.get(f"{BASE}/api/documents/d1").mock(
        return_value=Response(200, json=envelope)
    )

    async with client:
        result = await client.call(GET_DOCUMENT, path_params={"documentId": "d1"})

    assert result == envelope
    assert route.called
    assert route.calls[0].request.headers["Accept"] == "application/json"


@pytest.mark.asyncio
@respx.mock
async def test_404_message_is_exact(client):
    respx.get(f"{BASE}/api/documents/missing").mock(
        return_value=Response(404, json={"message": "not found"})
    )

    async with client:
        with pytest.raises(RequestError) as exc:
            await client.call(GET_DOCUMENT, path_params={"documentId": "missing"})

    assert str(exc.value) == "not found"
    assert exc.value.status_code == 404


@pytest.mark.asyncio
@respx.mock
async def test_500_text_body_message_is_exact(client):
    respx.get(f"{BASE}/api/documents/d1").mock(return_value=Response(500, text="boom"))

    async with client:
        with pytest.raises(RequestError) as exc:
            await client.call(GET_DOCUMENT, path_params={"documentId": "d1"})

    assert str(exc.value) == "boom"


@pytest.mark.asyncio
@respx.mock
async def test_path_params_are_encoded(client):
    route = respx.route(method="GET", host="localhost").mock(
        return_value=Response(200, json={"status": 200, "data": None})
    )

    async with client:
        await client.call(GET_DOCUMENT, path_params={"documentId": "a/b c"})

    raw_path = route.calls[0].request.url.raw_path
    assert raw_path == b"/project-service/api/documents/a%2Fb%20c"


@pytest.mark.asyncio
@respx.mock
async def test_authenticated_endpoint_uses_token(client):
    route = respx.get(f"{BASE}/api/v1/extraction/status/p1").mock(
        return_value=Response(200, json={"paperId": "p1", "status": "DONE"})
    )

    async with client:
        result = await client.call(AUTH_STATUS, path_params={"paperId": "p1"})

    assert result["status"] == "DONE"
    assert route.calls[0].request.headers["Authorization"] == "Bearer tok"


@pytest.mark.asyncio
@respx.mock
async def test_authenticated_endpoint_without_credentials():
    route = respx.get(f"{BASE}/api/v1/extraction/status/p1").mock(
        return_value=Response(200, json={})
    )

    async with ScholarClient() as client:
        with pytest.raises(AuthenticationError):
            await client.call(AUTH_STATUS, path_params={"paperId": "p1"})

    assert not route.called


@pytest.mark.asyncio
@respx.mock
async def test_research_target_uses_standalone_base():
    route = respx.get("http://research:8083/api/projects/p1").mock(
        return_value=Response(200, json={"status": 200, "data": {"id": "p1"}})
    )
    endpoint = Endpoint(
        "get_project", "GET", "/projects/{projectId}", service=None, target=Target.RESEARCH
    )

    client = ScholarClient(config=ServiceConfig(research_url="http://research:8083/api"))
    async with client:
        await client.call(endpoint, path_params={"projectId": "p1"})

    assert route.called


@pytest.mark.asyncio
@respx.mock
async def test_endpoint_without_service_uses_bare_gateway():
    route = respx.get("http://4.247.29.26:8989/api/ping").mock(
        return_value=Response(200, json=True)
    )
    endpoint = Endpoint("ping", "GET", "/api/ping", mode=ResponseMode.JSON, service=None)

    client = ScholarClient(config=ServiceConfig(environment=Environment.PROD))
    async with client:
        assert await client.call(endpoint) is True

    assert route.called


@pytest.mark.asyncio
@respx.mock
async def test_call_model_validates_envelope(client):
    respx.get(f"{BASE}/api/documents/d1").mock(
        return_value=Response(
            200,
            json={
                "status": 200,
                "message": "ok",
                "data": {"id": "d1", "projectId": "p1", "title": "Draft"},
            },
        )
    )

    async with client:
        env = await client.call_model(
            Envelope[Document], GET_DOCUMENT, path_params={"documentId": "d1"}
        )

    assert env.status == 200
    assert env.data.project_id == "p1"
    assert env.data.title == "Draft"


@pytest.mark.asyncio
@respx.mock
async def test_call_model_mismatch_raises(client):
    respx.get(f"{BASE}/api/documents/d1").mock(
        return_value=Response(200, json={"message": "no status"})
    )

    async with client:
        with pytest.raises(ResponseValidationError, match="Envelope"):
            await client.call_model(
                Envelope[Document], GET_DOCUMENT, path_params={"documentId": "d1"}
            )


@pytest.mark.asyncio
async def test_injected_http_client_is_not_closed():
    http = httpx.AsyncClient()
    client = ScholarClient(http=http)
    await client.aclose()
    assert not http.is_closed
    await http.aclose()


@pytest.mark.asyncio
async def test_owned_http_client_closed_on_exit():
    async with ScholarClient() as client:
        pass
    assert client.http.is_closed


def test_user_id_prefers_explicit_value(client):
    assert client.user_id("explicit") == "explicit"
    assert client.user_id() == "user-1"


def test_user_id_missing_raises():
    with pytest.raises(AuthenticationError, match="User not authenticated"):
        ScholarClient().user_id()


def test_from_env(monkeypatch):
    monkeypatch.setenv("SCHOLARAI_ENV", "prod")
    monkeypatch.delenv("SCHOLARAI_API_BASE_URL", raising=False)
    monkeypatch.setenv("SCHOLARAI_ACCESS_TOKEN", "env-token")
    monkeypatch.setenv("SCHOLARAI_USER_ID", "env-user")

    client = ScholarClient.from_env()

    assert client.resolver.config.environment is Environment.PROD
    assert client.credentials.get_token() == "env-token"
    assert client.user_id() == "env-user"
    assert (
        client.url_for(GET_DOCUMENT, {"documentId": 42})
        == "http://4.247.29.26:8989/project-service/api/documents/42"
    )
