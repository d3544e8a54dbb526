import pytest
from fastapi.testclient import TestClient

from shopapi.main import app
from shopapi.core import auth_middleware
from shopapi.core.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    MemberNotFoundError,
    SamePasswordError,
)
from shopapi.core.security import create_access_token
from shopapi.deps import get_login_service, get_member_service, get_signup_service
from shopapi.models.member import MemberRole
from shopapi.schemas.member import LoginResponse, MemberInfo

CURRENT_MEMBER_ID = 100


def _member_info():
    return MemberInfo(
        role=MemberRole.BRONZE,
        email="me@example.com",
        name="me",
        phone="01012345678",
        birth="20000327",
        address=None,
        point=1500,
        chance=0,
    )


class FakeMemberService:
    def __init__(self):
        self.changed_passwords = []

    def is_duplicate_email(self, email):
        return email == "taken@example.com"

    def is_duplicate_phone(self, phone):
        return phone == "01099998888"

    def exists_member_by_id(self, member_id):
        return member_id == CURRENT_MEMBER_ID

    def find_email(self, name, phone):
        if name == "nobody":
            raise MemberNotFoundError()
        return "me@example.com"

    def find_password(self, email, name, phone):
        return "aB3$efgh1Z"

    def change_password(self, member_id, new_password):
        if new_password == "samePassword1":
            raise SamePasswordError()
        self.changed_passwords.append((member_id, new_password))

    def change_address(self, member_id, address):
        pass

    def find_point_by_member_id(self, member_id):
        return 1500

    def find_info_by_user_id(self, member_id):
        return _member_info()


class FakeSignupService:
    def signup(self, request):
        if request.email == "taken@example.com":
            raise DuplicateEmailError(request.email)
        return 42


class FakeLoginService:
    def login(self, email, password):
        if password == "bad":
            raise InvalidCredentialsError()
        return LoginResponse(token="login_token", member_info=_member_info())


fake_member_service = FakeMemberService()


@pytest.fixture(autouse=True)
def patch_services():
    app.dependency_overrides[get_member_service] = lambda: fake_member_service
    app.dependency_overrides[get_signup_service] = lambda: FakeSignupService()
    app.dependency_overrides[get_login_service] = lambda: FakeLoginService()
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def authenticated():
    app.dependency_overrides[auth_middleware.get_current_member_id] = lambda: CURRENT_MEMBER_ID
    yield
    app.dependency_overrides.pop(auth_middleware.get_current_member_id, None)


client = TestClient(app)

SIGNUP_BODY = {
    "email": "a@b.com",
    "password": "asdfasdf@1",
    "name": "tester",
    "phone": "01011112222",
    "birth": "20000327",
}


def test_signup_created():
    res = client.post("/member/signup", json=SIGNUP_BODY)
    assert res.status_code == 201
    assert res.json() == {"role": "BRONZE", "memberId": 42}


def test_signup_duplicate_email_conflict():
    res = client.post("/member/signup", json={**SIGNUP_BODY, "email": "taken@example.com"})
    assert res.status_code == 409
    body = res.json()
    assert body["success"] is False
    assert body["error"]["code"] == "MEMBER_002"


def test_signup_invalid_payload():
    res = client.post("/member/signup", json={**SIGNUP_BODY, "phone": "12"})
    assert res.status_code == 422
    assert res.json()["error"]["code"] == "VALIDATION_001"


def test_duplication_email():
    res = client.post("/member/duplication/email", json={"email": "taken@example.com"})
    assert res.status_code == 200
    assert res.json() == {"isDuplicate": True}

    res = client.post("/member/duplication/email", json={"email": "free@example.com"})
    assert res.json() == {"isDuplicate": False}


def test_duplication_phone():
    res = client.post("/member/duplication/phone", json={"phone": "01099998888"})
    assert res.status_code == 200
    assert res.json() == {"isDuplicate": True}


def test_login_success():
    res = client.post("/member/login", json={"email": "me@example.com", "password": "ok"})
    assert res.status_code == 200
    body = res.json()
    assert body["token"] == "login_token"
    assert body["memberInfo"]["email"] == "me@example.com"
    assert "password" not in body["memberInfo"]


def test_login_bad_credentials():
    res = client.post("/member/login", json={"email": "me@example.com", "password": "bad"})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "AUTH_004"


def test_find_email():
    res = client.post("/member/find/email", json={"name": "me", "phone": "01012345678"})
    assert res.status_code == 200
    assert res.json() == {"email": "me@example.com"}


def test_find_email_not_found():
    res = client.post("/member/find/email", json={"name": "nobody", "phone": "010"})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "MEMBER_001"


def test_find_password():
    res = client.post(
        "/member/find/password",
        json={"email": "me@example.com", "name": "me", "phone": "01012345678"},
    )
    assert res.status_code == 200
    assert res.json() == {"tempPassword": "aB3$efgh1Z"}


def test_change_password_requires_auth():
    res = client.post("/member/change/password", json={"newPassword": "brandNew#22"})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "AUTH_001"


def test_change_password(authenticated):
    res = client.post("/member/change/password", json={"newPassword": "brandNew#22"})
    assert res.status_code == 200
    assert res.content == b""
    assert (CURRENT_MEMBER_ID, "brandNew#22") in fake_member_service.changed_passwords


def test_change_password_same_as_current(authenticated):
    res = client.post("/member/change/password", json={"newPassword": "samePassword1"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "MEMBER_004"


def test_change_address(authenticated):
    res = client.post("/member/change/address", json={"address": "Seoul"})
    assert res.status_code == 200


def test_point(authenticated):
    res = client.get("/member/point")
    assert res.status_code == 200
    assert res.json() == {"point": 1500}


def test_info(authenticated):
    res = client.get("/member/info")
    assert res.status_code == 200
    info = res.json()["memberInfo"]
    assert info["email"] == "me@example.com"
    assert info["role"] == "BRONZE"
    assert info["point"] == 1500


def test_point_with_real_token():
    token = create_access_token({"sub": "me@example.com", "member_id": CURRENT_MEMBER_ID})
    res = client.get("/member/point", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 200
    assert res.json() == {"point": 1500}


def test_point_with_invalid_token():
    res = client.get("/member/point", headers={"Authorization": "Bearer garbage"})
    assert res.status_code == 401


def test_is_login_without_token():
    res = client.get("/member/isLogin")
    assert res.status_code == 200
    assert res.json() == {"isLogin": False}


def test_is_login_with_token():
    token = create_access_token({"sub": "me@example.com", "member_id": CURRENT_MEMBER_ID})
    res = client.get("/member/isLogin", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 200
    assert res.json() == {"isLogin": True}


def test_is_login_with_token_of_deleted_member():
    token = create_access_token({"sub": "gone@example.com", "member_id": 999})
    res = client.get("/member/isLogin", headers={"Authorization": f"Bearer {token}"})
    assert res.json() == {"isLogin": False}
