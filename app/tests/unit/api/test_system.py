"""Tests for the system routes and middleware."""


class TestSystemRoutes:
    def test_health(self, client):
        """Health check answers ok."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_version(self, client, settings):
        """Version reports GIT_SHA."""
        response = client.get("/version")
        assert response.json() == {"version": settings.GIT_SHA}

    def test_request_id_echoed(self, client):
        """A given X-Request-ID is returned unchanged."""
        response = client.get("/health", headers={"X-Request-ID": "req-42"})
        assert response.headers["X-Request-ID"] == "req-42"


class TestLifespan:
    def test_services_on_state(self, client, app):
        """The lifespan creates the shared services."""
        state = app.state
        assert state.translation_service.registry.loaded_from_remote is True
        assert state.translation_editor.table == "cms_translations"
        assert state.content_service is not None
        assert state.session_cache is state.translation_service.session_cache
