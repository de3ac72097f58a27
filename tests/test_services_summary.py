import pytest
import respx
from httpx import Response
from scholarai_client.core.auth import StaticCredentialProvider
from scholarai_client.core.client import ScholarClient
from scholarai_client.core.errors import RequestError
from scholarai_client.services.summary import (
    generate_summary,
    get_summary,
    regenerate_summary,
    update_validation_status,
)

BASE = "http://localhost:8989/project-service/api/v1/papers/paper-1/summary"

SUMMARY = {
    "id": "sum-1",
    "paperId": "paper-1",
    "oneLiner": "A faster transformer.",
    "keyContributions": ["linear attention"],
    "validationStatus": "UNVALIDATED",
}


@pytest.fixture
def client():
    return ScholarClient(credentials=StaticCredentialProvider("tok"))


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "func, suffix", [(generate_summary, "/generate"), (regenerate_summary, "/regenerate")]
)
@respx.mock
async def test_generate_and_regenerate(client, func, suffix):
    route = respx.post(f"{BASE}{suffix}").mock(return_value=Response(200, json=SUMMARY))

    async with client:
        result = await func(client, "paper-1")

    assert result == SUMMARY
    assert route.calls[0].request.headers["Authorization"] == "Bearer tok"


@pytest.mark.asyncio
@respx.mock
async def test_get_summary(client):
    respx.get(BASE).mock(return_value=Response(200, json=SUMMARY))

    async with client:
        assert (await get_summary(client, "paper-1"))["oneLiner"] == "A faster transformer."


@pytest.mark.asyncio
@respx.mock
async def test_get_summary_missing(client):
    respx.get(BASE).mock(return_value=Response(404, text="Summary not found"))

    async with client:
        with pytest.raises(RequestError) as exc:
            await get_summary(client, "paper-1")

    assert str(exc.value) == "Summary not found"


@pytest.mark.asyncio
@respx.mock
async def test_update_validation_status_with_notes(client):
    route = respx.patch(f"{BASE}/validation").mock(
        return_value=Response(200, json={**SUMMARY, "validationStatus": "VALIDATED"})
    )

    async with client:
        result = await update_validation_status(
            client, "paper-1", "VALIDATED", notes="checked by hand"
        )

    assert result["validationStatus"] == "VALIDATED"
    params = route.calls[0].request.url.params
    assert params["status"] == "VALIDATED"
    assert params["notes"] == "checked by hand"


@pytest.mark.asyncio
@respx.mock
async def test_update_validation_status_omits_empty_notes(client):
    route = respx.patch(f"{BASE}/validation").mock(
        return_value=Response(200, json=SUMMARY)
    )

    async with client:
        await update_validation_status(client, "paper-1", "REJECTED", notes="")

    assert "notes" not in route.calls[0].request.url.params
