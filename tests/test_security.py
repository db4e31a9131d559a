from __future__ import annotations

import base64

import pytest

from task_api.core.security import (
    MalformedCredentialsError,
    build_challenge,
    create_password_context,
    decode_basic_credentials,
    extract_basic_payload,
    hash_password,
    verify_password,
)


def _encode(raw: str) -> str:
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


async def test_hash_embeds_cost_and_verifies() -> None:
    context = create_password_context(4)
    hashed = await hash_password("p@ss", context)
    assert hashed != "p@ss"
    assert "$04$" in hashed
    assert await verify_password("p@ss", hashed, context) is True
    assert await verify_password("wrong", hashed, context) is False


async def test_verify_returns_false_for_malformed_hash() -> None:
    context = create_password_context(4)
    assert await verify_password("p@ss", "not-a-hash", context) is False


def test_extract_basic_payload_requires_basic_scheme() -> None:
    assert extract_basic_payload(None) is None
    assert extract_basic_payload("Bearer abc") is None
    assert extract_basic_payload("Basic") is None
    assert extract_basic_payload("basic abc") == "abc"


def test_decode_splits_on_first_colon() -> None:
    credentials = decode_basic_credentials(_encode("alice:pa:ss"))
    assert credentials.username == "alice"
    assert credentials.password == "pa:ss"


@pytest.mark.parametrize("raw", [":secret", "alice:", "alice", ""])
def test_decode_rejects_empty_parts(raw: str) -> None:
    with pytest.raises(MalformedCredentialsError):
        decode_basic_credentials(_encode(raw))


def test_decode_rejects_invalid_base64() -> None:
    with pytest.raises(MalformedCredentialsError):
        decode_basic_credentials("%%%not-base64%%%")


def test_challenge_names_scheme_and_realm() -> None:
    assert build_challenge("TaskAPI") == {"WWW-Authenticate": 'Basic realm="TaskAPI"'}
