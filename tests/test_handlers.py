import pytest
from httpx import ASGITransport, AsyncClient
from mangum import Mangum

from app.handlers import auth_handler, todo_handler, user_handler

pytestmark = pytest.mark.anyio


def test_handlers_wrap_apps():
    for module in (auth_handler, todo_handler, user_handler):
        assert isinstance(module.handler, Mangum)


async def test_todo_lambda_is_gated():
    transport = ASGITransport(app=todo_handler.app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        res = await ac.get("/todos/")
    assert res.status_code == 401
    assert res.json()["error"] == "Unauthorized"


async def test_auth_lambda_refresh_is_public():
    transport = ASGITransport(app=auth_handler.app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        res = await ac.post("/auth/refresh-token", headers={"Refresh-Token": "Bearer garbage"})
    assert res.status_code == 401
    assert res.json()["message"] == "Invalid refresh token"
