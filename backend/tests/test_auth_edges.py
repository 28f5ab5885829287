from fastapi.testclient import TestClient
from fitmarket.main import app
from fitmarket.security import create_access_token
import uuid

client = TestClient(app)
def unique(): return f"{uuid.uuid4().hex[:10]}@ex.com"

def test_token_expired():
    # create a user (so the user id exists)
    email = unique(); pw = "StrongPassw0rd!"
    client.post("/auth/register", json={"email": email, "name": "Y", "password": pw, "role": "client"})
    # login to get user id via /auth/me
    tok = client.post("/auth/login", json={"email": email, "password": pw}).json()["access_token"]
    me = client.get("/auth/me", headers={"Authorization": f"Bearer {tok}"}).json()
    user_id = me["id"]

    # craft an already-expired token for the same user id
    expired = create_access_token(user_id, expires_minutes=-1)

    r = client.get("/auth/me", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Token expired"

def test_token_for_unknown_user():
    tok = create_access_token(str(uuid.uuid4()))
    r = client.get("/auth/me", headers={"Authorization": f"Bearer {tok}"})
    assert r.status_code == 401

def test_garbage_token():
    r = client.get("/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Not authenticated"

def test_expired_token_rejected_on_publish(monkeypatch):
    email = unique(); pw = "StrongPassw0rd!"
    client.post("/auth/register", json={"email": email, "name": "T", "password": pw, "role": "trainer"})
    token = client.post("/auth/login", json={"email": email, "password": pw}).json()["access_token"]

    # Patch the exact symbol used in the guard
    from jose.exceptions import ExpiredSignatureError
    def fake_decode(_): raise ExpiredSignatureError()

    import fitmarket.deps.auth as deps_auth
    monkeypatch.setattr(deps_auth, "decode_token", fake_decode)

    r = client.post("/advice",
                    headers={"Authorization": f"Bearer {token}"},
                    json={"title": "x", "body": "should not matter"})
    assert r.status_code == 401, r.text
    assert r.json()["detail"] == "Token expired"
