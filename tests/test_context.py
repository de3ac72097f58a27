import uuid

from scholarai_client.core.auth import ContextCredentialProvider
from scholarai_client.core.context import (
    apply_request_context,
    get_context,
    reset_context,
)


def test_apply_and_get_context_isolated():
    tokens = apply_request_context(access_token="tok", user_id="u1", request_id="r1")
    ctx = get_context()
    assert ctx.access_token == "tok"
    assert ctx.user_id == "u1"
    assert ctx.request_id == "r1"
    reset_context(tokens)

    ctx = get_context()
    assert ctx.access_token is None
    assert ctx.user_id is None
    assert ctx.request_id is None


def test_request_id_generated():
    tokens = apply_request_context(access_token="k")
    uuid.UUID(hex=get_context().request_id)  # should parse
    reset_context(tokens)


def test_context_credential_provider_reads_current_values():
    provider = ContextCredentialProvider()
    assert provider.get_token() is None

    tokens = apply_request_context(access_token="ctx-token", user_id="ctx-user")
    try:
        assert provider.get_token() == "ctx-token"
        assert provider.get_user_id() == "ctx-user"
    finally:
        reset_context(tokens)
