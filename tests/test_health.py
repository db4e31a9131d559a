from __future__ import annotations

from httpx import AsyncClient

from task_api import __version__


async def test_health_reports_uptime(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert isinstance(body["uptime"], (int, float))
    assert body["uptime"] >= 0


async def test_openapi_document_uses_package_version(client: AsyncClient) -> None:
    response = await client.get("/openapi.json")

    assert response.status_code == 200
    assert response.json()["info"]["version"] == __version__
