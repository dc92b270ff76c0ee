"""Tests for the /api/v1/i18n routes."""

PREFIX = "/api/v1/i18n"


class TestLanguages:
    def test_lists_languages_default_first(self, client):
        """Languages are listed with the default first."""
        body = client.get(f"{PREFIX}/languages").json()
        assert [lang["code"] for lang in body["languages"]] == ["en", "sq", "fr", "de", "tr", "mk"]
        assert body["default"] == "en"
        assert body["active"] == "en"

    def test_active_from_accept_language(self, client):
        """Without a cookie the Accept-Language header decides."""
        body = client.get(
            f"{PREFIX}/languages", headers={"Accept-Language": "de-DE,de;q=0.9"}
        ).json()
        assert body["active"] == "de"

    def test_active_from_cookie(self, client):
        """The language cookie beats the header."""
        client.cookies.set("kudosim_language", "sq")
        body = client.get(f"{PREFIX}/languages", headers={"Accept-Language": "de"}).json()
        assert body["active"] == "sq"


class TestChangeLanguage:
    def test_sets_cookie(self, client):
        """A supported code is stored in the language cookie."""
        response = client.put(f"{PREFIX}/language", json={"code": "de"})
        assert response.status_code == 200
        assert response.json() == {"language": "de"}
        assert response.cookies["kudosim_language"] == "de"
        assert "Max-Age=31536000" in response.headers["set-cookie"]

    def test_unsupported_code(self, client):
        """Unknown codes are rejected."""
        response = client.put(f"{PREFIX}/language", json={"code": "xx"})
        assert response.status_code == 400

    def test_empty_code(self, client):
        """Blank bodies fail validation."""
        assert client.put(f"{PREFIX}/language", json={"code": ""}).status_code == 422


class TestBundles:
    def test_static_bundle(self, client, table_client):
        """Static namespaces are served without touching the store."""
        body = client.get(f"{PREFIX}/bundles/de/package").json()
        assert body["resources"]["valid.for"] == "Gültig für"
        assert body["source"] == "static"
        assert body["error"] is False
        assert table_client.calls_for("select", "cms_translations") == 0

    def test_remote_bundle(self, client):
        """Remote namespaces are fetched and fall back per key."""
        body = client.get(f"{PREFIX}/bundles/de/faq").json()
        assert body["resources"] == {
            "title": "Häufige Fragen",
            "refund.question": "Can I get a refund?",
        }
        assert body["source"] == "remote"

    def test_static_only_language(self, client):
        """Languages shipped only as static bundles are served."""
        body = client.get(f"{PREFIX}/bundles/mk/features").json()
        assert body["resources"]["yourEsim"] == "Вашиот eSIM"
        assert body["resources"]["instant.title"] == "Instant activation"

    def test_unknown_language(self, client):
        """Unknown languages are 404."""
        assert client.get(f"{PREFIX}/bundles/xx/common").status_code == 404


class TestTranslate:
    def test_interpolates_query_variables(self, client):
        """Extra query parameters fill placeholders."""
        body = client.get(
            f"{PREFIX}/translate",
            params={"key": "footer.rights", "language": "en", "year": "2024"},
        ).json()
        assert body["text"] == "© 2024 KudoSIM. All rights reserved."

    def test_namespace_and_cookie_language(self, client):
        """The cookie decides the language when none is given."""
        client.cookies.set("kudosim_language", "de")
        body = client.get(
            f"{PREFIX}/translate", params={"key": "valid.for", "namespace": "package"}
        ).json()
        assert body == {"key": "valid.for", "language": "de", "text": "Gültig für"}

    def test_unknown_key_returns_key(self, client):
        """Missing keys come back as the key."""
        body = client.get(f"{PREFIX}/translate", params={"key": "nope.nothing"}).json()
        assert body["text"] == "nope.nothing"
