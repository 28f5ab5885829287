import uuid
from fastapi.testclient import TestClient
from fitmarket.main import app

client = TestClient(app)
PWD = "StrongPassw0rd!"

def uniq_email(prefix="u"):
    return f"{prefix}-{uuid.uuid4().hex[:8]}@ex.com"

def register(role, email=None, name="Test User", password=PWD):
    email = email or uniq_email(role)
    r = client.post("/auth/register", json={"email": email, "name": name, "password": password, "role": role})
    assert r.status_code == 201, r.text
    return r.json()

def login(email, password=PWD):
    r = client.post("/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return r.json()["access_token"]

def make_user(role, name="Test User"):
    """Register + login; returns (user json, auth headers)."""
    user = register(role, name=name)
    return user, {"Authorization": f"Bearer {login(user['email'])}"}
