from fastapi.testclient import TestClient
from fitmarket.main import app
import uuid

client = TestClient(app)

def unique_email():
    return f"u_{uuid.uuid4().hex[:10]}@example.com"

def test_register_weak_password_rejected():
    r = client.post("/auth/register", json={"email": unique_email(), "name": "Weak", "password": "short", "role": "client"})
    assert r.status_code == 422

def test_register_requires_role():
    r = client.post("/auth/register", json={"email": unique_email(), "name": "NoRole", "password": "StrongPassw0rd!"})
    assert r.status_code == 422

def test_register_unknown_role_rejected():
    r = client.post("/auth/register",
                    json={"email": unique_email(), "name": "Admin", "password": "StrongPassw0rd!", "role": "admin"})
    assert r.status_code == 422

def test_register_login_and_me():
    email = unique_email()
    pwd = "StrongPassw0rd!"
    # register
    r = client.post("/auth/register", json={"email": email, "name": "Ana Lopez", "password": pwd, "role": "trainer"})
    assert r.status_code == 201
    assert r.json()["avatar_url"] is None
    # login
    r = client.post("/auth/login", json={"email": email, "password": pwd})
    assert r.status_code == 200
    assert r.json()["token_type"] == "bearer"
    token = r.json()["access_token"]
    # me
    r = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    body = r.json()
    assert body["email"] == email
    assert body["role"] == "trainer"
    assert body["initials"] == "AL"
    assert "password_hash" not in body

def test_requires_auth():
    # no token -> 401s
    assert client.get("/workouts").status_code == 401
    assert client.get("/purchases").status_code == 401
    assert client.get("/dashboard").status_code == 401
