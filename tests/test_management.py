from management.commands.show_urls import collect_routes


def test_collect_routes_lists_api_surface(client):
    rows = collect_routes(client.app)
    paths = {path for path, _, _ in rows}
    assert {
        "/api/stats",
        "/api/whitelist",
        "/api/whitelist/{contact_id}",
        "/api/blocked/{blocked_id}",
        "/api/call-history",
        "/api/settings",
        "/api/ai-chat",
        "/api/voice-command",
        "/api/usage",
        "/api/screen",
        "/api/auth/login",
        "/health",
    } <= paths
    methods = {path: verbs for path, verbs, _ in rows}
    assert set(methods["/api/settings"].split(", ")) == {"GET", "PUT"}


def test_collect_routes_walks_nested_routers():
    from fastapi import APIRouter, FastAPI

    inner = APIRouter(prefix="/inner")

    @inner.get("/ping")
    async def ping():
        return {"ok": True}

    outer = APIRouter(prefix="/outer")
    outer.include_router(inner)
    app = FastAPI()
    app.include_router(outer)

    assert [(path, methods) for path, methods, _ in collect_routes(app)] == [("/outer/inner/ping", "GET")]
