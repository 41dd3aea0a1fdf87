"""End-to-end tests for the wish feed and supports."""

import pytest
from fastapi.testclient import TestClient

from wishes.config import Settings
from wishes.interface.api.app import create_app
from wishes.util.jwt import create_token
from tests.di import build_test_container


@pytest.fixture
def app():
    """Create an app backed by a fresh in-memory container."""
    return create_app(Settings(environment="test"), container=build_test_container())


@pytest.fixture
def clients(app):
    """Independent browsers sharing one app, each with its own cookie jar."""
    return lambda: TestClient(app)


def _post_wish(client: TestClient, text: str) -> str:
    response = client.post("/wishes", json={"wish": text})
    assert response.status_code == 201
    return response.json()["wish"]["id"]


class TestSupport:
    """End-to-end tests for supporting wishes."""

    def test_two_sessions_support_and_author_cannot(self, clients):
        """Each identity supports once; the author never can."""
        # Arrange
        author, first, second = clients(), clients(), clients()
        wish_id = _post_wish(author, "World peace")
        first.cookies.set("session_id", "fan-1")
        second.cookies.set("session_id", "fan-2")

        # Act
        first_result = first.post(f"/wishes/{wish_id}/support")
        second_result = second.post(f"/wishes/{wish_id}/support")
        repeat = first.post(f"/wishes/{wish_id}/support")
        self_support = author.post(f"/wishes/{wish_id}/support")

        # Assert
        assert first_result.json() == {
            "message": "Wish supported.",
            "success": True,
            "alreadySupported": False,
        }
        assert second_result.json()["alreadySupported"] is False
        assert repeat.status_code == 200
        assert repeat.json()["alreadySupported"] is True
        assert self_support.status_code == 403
        assert self_support.json()["code"] == "SELF_SUPPORT_NOT_ALLOWED"

        status = first.get(f"/wishes/{wish_id}/support").json()
        assert status["isSupported"] is True
        assert status["wish"]["supportCount"] == 2

    def test_support_mints_session_for_new_visitor(self, clients):
        # Arrange
        author, visitor = clients(), clients()
        wish_id = _post_wish(author, "World peace")

        # Act
        response = visitor.post(f"/wishes/{wish_id}/support")

        # Assert
        assert response.status_code == 200
        assert visitor.cookies.get("session_id")
        assert visitor.get(f"/wishes/{wish_id}/support").json()["isSupported"] is True

    def test_signed_in_author_cannot_support(self, clients):
        """The session cookie is ignored once the author is signed in."""
        # Arrange
        author = clients()
        token = create_token("1", "Alice", Settings().auth)
        author.cookies.set("auth_token", token)
        wish_id = _post_wish(author, "World peace")
        author.cookies.set("session_id", "another-device")

        # Act
        response = author.post(f"/wishes/{wish_id}/support")

        # Assert
        assert response.status_code == 403

    def test_unsupport(self, clients):
        # Arrange
        author, fan = clients(), clients()
        wish_id = _post_wish(author, "World peace")
        fan.cookies.set("session_id", "fan-1")
        fan.post(f"/wishes/{wish_id}/support")

        # Act
        removed = fan.delete(f"/wishes/{wish_id}/support")
        again = fan.delete(f"/wishes/{wish_id}/support")

        # Assert
        assert removed.json() == {
            "message": "Support removed.",
            "success": True,
            "wasSupported": True,
        }
        assert again.json()["success"] is False
        assert again.json()["wasSupported"] is False

    def test_support_unknown_wish(self, clients):
        fan = clients()
        fan.cookies.set("session_id", "fan-1")

        response = fan.post("/wishes/does-not-exist/support")

        assert response.status_code == 404

    def test_failed_support_does_not_mint_session(self, clients):
        """A visitor whose support fails leaves without a session cookie."""
        # Arrange
        visitor = clients()

        # Act
        response = visitor.post("/wishes/does-not-exist/support")

        # Assert
        assert response.status_code == 404
        assert "set-cookie" not in response.headers
        assert visitor.cookies.get("session_id") is None


class TestFeed:
    """End-to-end tests for GET /wishes."""

    def test_feed_is_newest_first_and_hides_authors(self, clients):
        # Arrange
        for text in ["first", "second", "third"]:
            _post_wish(clients(), text)
        viewer = clients()

        # Act
        response = viewer.get("/wishes", params={"limit": 2})

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert data["limit"] == 2
        assert data["offset"] == 0
        assert len(data["wishes"]) == 2
        for wish in data["wishes"]:
            assert "sessionId" not in wish
            assert "userId" not in wish
            assert "authorId" not in wish
            assert wish["isSupported"] is False

    def test_feed_marks_viewer_supports(self, clients):
        # Arrange
        author, viewer = clients(), clients()
        wish_id = _post_wish(author, "World peace")
        viewer.cookies.set("session_id", "viewer")
        viewer.post(f"/wishes/{wish_id}/support")

        # Act
        data = viewer.get("/wishes").json()

        # Assert
        assert data["wishes"][0]["isSupported"] is True
        assert data["wishes"][0]["supportCount"] == 1

    def test_feed_clamps_pagination(self, clients):
        response = clients().get("/wishes", params={"limit": 500, "offset": -1})

        assert response.status_code == 200
        assert response.json()["limit"] == 100
        assert response.json()["offset"] == 0

    def test_feed_ignores_non_numeric_pagination(self, clients):
        """Unparsable values fall back to the default page."""
        response = clients().get("/wishes", params={"limit": "abc", "offset": "x"})

        assert response.status_code == 200
        assert response.json()["limit"] == 20
        assert response.json()["offset"] == 0
