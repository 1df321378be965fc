def enter_developer(client, section="api"):
    client.post("/api/v1/dashboard/enter/developer")
    return client.post(f"/api/v1/dashboard/sections/{section}")


def test_probes(api_client):
    assert api_client.get("/health").json() == {"status": "healthy"}
    assert api_client.get("/ready").json() == {"status": "ready"}
    response = api_client.get("/")
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_first_visit_lands_on_landing_and_sets_cookie(api_client):
    response = api_client.get("/api/v1/dashboard")
    assert response.status_code == 200
    assert response.json()["view"] == "landing"
    assert "dashboard_session" in response.cookies


def test_enter_portal_and_switch_section(api_client):
    response = api_client.post("/api/v1/dashboard/enter/developer")
    body = response.json()
    assert body["portal"] == "AI Developer Portal"
    assert body["selected"] == "overview"
    assert body["panel"]["kind"] == "overview"

    body = api_client.post("/api/v1/dashboard/sections/projects").json()
    assert body["selected"] == "projects"
    assert body["panel"]["state"] == "ready"


def test_unknown_view_is_404(api_client):
    assert api_client.post("/api/v1/dashboard/enter/admin").status_code == 404


def test_panel_requires_open_portal(api_client):
    assert api_client.get("/api/v1/dashboard/panel").status_code == 409


def test_credential_lifecycle_over_http(api_client, backend):
    enter_developer(api_client, "api")

    body = api_client.post("/api/v1/dashboard/panel/rows", json={
        "fields": {"name": "Prod Key", "provider": "openai", "key_value": "sk-test-123"}
    }).json()
    row = body["rows"][0]
    assert row["secret"] == "•" * 11
    assert body["notifications"][0]["description"] == "API key added successfully"

    body = api_client.post(f"/api/v1/dashboard/panel/rows/{row['id']}/reveal").json()
    assert body["rows"][0]["secret"] == "sk-test-123"

    copied = api_client.post(f"/api/v1/dashboard/panel/rows/{row['id']}/copy").json()
    assert copied["value"] == "sk-test-123"

    body = api_client.patch(f"/api/v1/dashboard/panel/rows/{row['id']}/enabled", json={"enabled": False}).json()
    assert body["rows"][0]["enabled"] is False

    body = api_client.post(f"/api/v1/dashboard/panel/rows/{row['id']}/mask").json()
    assert body["rows"][0]["secret"] == "•" * 11

    body = api_client.delete(f"/api/v1/dashboard/panel/rows/{row['id']}").json()
    assert body["rows"] == []
    assert backend.tables["api_keys"] == []


def test_failed_create_returns_toast_and_open_form(api_client, backend):
    enter_developer(api_client, "api")
    backend.fail("insert", "duplicate key value violates unique constraint")

    body = api_client.post("/api/v1/dashboard/panel/rows", json={
        "fields": {"name": "k", "provider": "openai", "key_value": "x"}
    }).json()

    assert body["notifications"][0]["variant"] == "destructive"
    assert body["notifications"][0]["description"] == "duplicate key value violates unique constraint"
    assert body["form"]["open"] is True
    assert body["form"]["values"]["name"] == "k"


def test_form_state(api_client):
    enter_developer(api_client, "youtube")
    body = api_client.put("/api/v1/dashboard/panel/form", json={"open": True}).json()
    assert body["form"]["open"] is True


def test_unknown_row_is_404(api_client):
    enter_developer(api_client, "api")
    assert api_client.post("/api/v1/dashboard/panel/rows/missing/reveal").status_code == 404


def test_unsupported_operation_is_409(api_client, backend):
    row = backend.seed("deployments", url="https://site.example")
    enter_developer(api_client, "deployments")

    assert api_client.delete(f"/api/v1/dashboard/panel/rows/{row['id']}").status_code == 409
    assert api_client.post("/api/v1/dashboard/panel/query", json={"sql": "select 1"}).status_code == 409
    assert api_client.put("/api/v1/dashboard/panel/preview", json={"mode": "code"}).status_code == 409


def test_query_with_embedded_error(api_client, backend):
    backend.sql_responses["SELECT 1/0"] = {"error": "division by zero"}
    enter_developer(api_client, "query")

    body = api_client.post("/api/v1/dashboard/panel/query", json={"sql": "SELECT 1/0"}).json()

    assert body["data"]["result"]["error"] == "division by zero"
    assert body["data"]["result"]["rows"] is None
    assert body["notifications"][0]["description"] == "division by zero"


def test_project_status_and_filter(api_client, backend):
    project = backend.seed("projects", name="Blog", status="review")
    backend.seed("projects", name="Shop", status="draft")
    enter_developer(api_client, "projects")

    api_client.patch(f"/api/v1/dashboard/panel/rows/{project['id']}/status", json={"status": "approved"})
    body = api_client.put("/api/v1/dashboard/panel/filter", json={"status": "approved"}).json()

    assert [r["display_name"] for r in body["rows"]] == ["Blog"]


def test_users_search_and_invite(api_client, backend):
    backend.add_user("alice@example.com")
    backend.add_user("bob@example.com")
    enter_developer(api_client, "users")

    body = api_client.put("/api/v1/dashboard/panel/search", json={"term": "bob"}).json()
    assert [r["display_name"] for r in body["rows"]] == ["bob@example.com"]

    body = api_client.post("/api/v1/dashboard/panel/invite", json={"email": "carol@example.com"}).json()
    assert body["notifications"][0]["title"] == "Invites unavailable"
    assert api_client.post("/api/v1/dashboard/panel/invite", json={"email": "nope"}).status_code == 422


def test_table_columns(api_client, backend):
    from channelsite.modules.catalog.service import COLUMNS_SQL
    backend.sql_responses[COLUMNS_SQL.format(table="projects").strip()] = [
        {"column_name": "id", "data_type": "uuid", "is_nullable": "NO", "column_default": None},
    ]
    enter_developer(api_client, "database")

    body = api_client.get("/api/v1/dashboard/panel/tables/projects/columns").json()
    assert body["columns"][0]["column_name"] == "id"
    assert api_client.get("/api/v1/dashboard/panel/tables/bad-name/columns").status_code == 400


def test_status_check(api_client, backend):
    backend.seed("system_status", service="github", status=True, last_checked="1")
    enter_developer(api_client, "monitoring")

    body = api_client.post("/api/v1/dashboard/panel/status-check").json()
    assert body["notifications"][0]["description"] == "System status refreshed"


def test_creator_chat_and_preview(api_client):
    api_client.post("/api/v1/dashboard/enter/creator")

    body = api_client.post("/api/v1/dashboard/panel/messages", json={"content": "my channel"}).json()
    assert [m["type"] for m in body["data"]["messages"]] == ["bot", "user", "bot"]

    body = api_client.put("/api/v1/dashboard/panel/preview", json={"mode": "code"}).json()
    assert body["data"]["preview_mode"] == "code"


def test_refresh_picks_up_seeded_rows(api_client, backend):
    enter_developer(api_client, "github")
    backend.seed("github_tokens", name="gh", token="ghp_1")

    body = api_client.post("/api/v1/dashboard/panel/refresh").json()
    assert len(body["rows"]) == 1


def test_home_resets_portal(api_client, backend):
    enter_developer(api_client, "ai-keys")
    body = api_client.post("/api/v1/dashboard/home").json()
    assert body["view"] == "landing"
    assert backend.channels == []


def test_sessions_are_isolated(api_client, backend):
    from fastapi.testclient import TestClient
    from channelsite.main import app

    enter_developer(api_client, "api")
    other = TestClient(app)
    assert other.get("/api/v1/dashboard").json()["view"] == "landing"
    assert api_client.get("/api/v1/dashboard").json()["view"] == "developer"


def test_default_rate_limit_spares_probes(api_client, monkeypatch):
    from slowapi import Limiter
    from slowapi.util import get_remote_address
    from channelsite import main

    limiter = Limiter(key_func=get_remote_address, default_limits=["2/minute"])
    limiter.exempt(main.health)
    limiter.exempt(main.ready)
    monkeypatch.setattr(main.app.state, "limiter", limiter)

    assert [api_client.get("/").status_code for _ in range(3)] == [200, 200, 429]
    assert all(api_client.get("/health").status_code == 200 for _ in range(5))


def test_two_sessions_on_one_panel_both_subscribe(api_client, backend):
    from fastapi.testclient import TestClient
    from channelsite.main import app

    enter_developer(api_client, "api")
    other = TestClient(app)
    enter_developer(other, "api")

    assert len([c for c in backend.channels if c.table == "api_keys"]) == 2
