from __future__ import annotations

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from task_api.core.middleware import REQUEST_ID_HEADER


async def test_unmatched_route_returns_not_found_message(client: AsyncClient) -> None:
    response = await client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


async def test_unsupported_method_uses_status_phrase(client: AsyncClient) -> None:
    response = await client.patch("/health")

    assert response.status_code == 405
    assert response.json() == {"message": "Method Not Allowed"}


async def test_malformed_json_body_is_a_validation_error(client: AsyncClient) -> None:
    response = await client.post(
        "/users",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Validation error"}


async def test_unexpected_errors_hide_internal_details(app: FastAPI) -> None:
    async def explode() -> None:
        raise RuntimeError("database password is hunter2")

    app.add_api_route("/explode", explode, methods=["GET"])
    transport = ASGITransport(app=app, raise_app_exceptions=False)

    async with AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        response = await http_client.get("/explode")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error"}
    assert "hunter2" not in response.text


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/health", headers={REQUEST_ID_HEADER: "req-123"})

    assert response.headers[REQUEST_ID_HEADER] == "req-123"


async def test_request_id_is_generated_for_error_responses(client: AsyncClient) -> None:
    response = await client.get("/tasks")

    assert response.status_code == 401
    assert response.headers.get(REQUEST_ID_HEADER)
