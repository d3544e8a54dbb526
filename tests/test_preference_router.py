import pytest
from fastapi.testclient import TestClient

from shopapi.main import app
from shopapi.core import auth_middleware
from shopapi.core.exceptions import (
    ItemNotFoundError,
    PreferenceForbiddenError,
    PreferenceNotFoundError,
)
from shopapi.deps import get_preference_service
from shopapi.schemas.preference import PreferenceSummary

CURRENT_MEMBER_ID = 100


class FakePreferenceService:
    def save_preference_item(self, member_id, item_id):
        if item_id == 999:
            raise ItemNotFoundError(item_id)
        return 7

    def find_preference_by_member_id(self, member_id):
        return [
            PreferenceSummary(
                thumbnail="jeans.png", name="Slim Denim Jeans", price=49000, sale=True, preference_id=7
            )
        ]

    def delete_preference(self, member_id, preference_id):
        if preference_id == 404:
            raise PreferenceNotFoundError(preference_id)
        if preference_id == 403:
            raise PreferenceForbiddenError(preference_id)


@pytest.fixture(autouse=True)
def patch_service_and_auth():
    app.dependency_overrides[get_preference_service] = lambda: FakePreferenceService()
    app.dependency_overrides[auth_middleware.get_current_member_id] = lambda: CURRENT_MEMBER_ID
    yield
    app.dependency_overrides.clear()


client = TestClient(app)


def test_add_preference():
    res = client.post("/preference", json={"itemId": 1})
    assert res.status_code == 201
    assert res.json() == {"preferenceId": 7}


def test_add_preference_unknown_item():
    res = client.post("/preference", json={"itemId": 999})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "ITEM_001"


def test_list_preferences():
    res = client.get("/preference")
    assert res.status_code == 200
    assert res.json() == {
        "preferences": [
            {
                "thumbnail": "jeans.png",
                "name": "Slim Denim Jeans",
                "price": 49000,
                "sale": True,
                "preferenceId": 7,
            }
        ]
    }


def test_delete_preference():
    res = client.delete("/preference/7")
    assert res.status_code == 200


def test_delete_preference_not_found():
    res = client.delete("/preference/404")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "PREFERENCE_001"


def test_delete_preference_of_other_member():
    res = client.delete("/preference/403")
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "PREFERENCE_002"


def test_preference_requires_auth():
    app.dependency_overrides.pop(auth_middleware.get_current_member_id, None)
    res = client.get("/preference")
    assert res.status_code == 401
