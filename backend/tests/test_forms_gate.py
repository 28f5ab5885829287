from helpers import client, make_user

def open_form(name, headers):
    r = client.get(f"/forms/{name}", headers=headers)
    assert r.status_code == 200, r.text
    return r.json()

def test_gate_table():
    expected = {
        "client": {"workout": "denied", "nutrition": "denied", "advice": "denied"},
        "trainer": {"workout": "ready", "nutrition": "denied", "advice": "ready"},
        "nutritionist": {"workout": "denied", "nutrition": "ready", "advice": "ready"},
    }
    for role, forms in expected.items():
        _, h = make_user(role)
        for name, state in forms.items():
            assert open_form(name, h)["state"] == state, (role, name)

def test_denied_form_shows_restricted_access():
    _, h = make_user("client")
    body = open_form("advice", h)
    assert body["state"] == "denied"
    assert body["message"] == "Restricted Access"
    assert body["categories"] == []

def test_advice_form_lists_categories_for_role():
    _, h = make_user("nutritionist")
    body = open_form("advice", h)
    values = [c["value"] for c in body["categories"]]
    assert values[:3] == ["general", "motivation", "habits"]
    assert "diet" in values and "technique" not in values

def test_unknown_form_404():
    _, h = make_user("trainer")
    assert client.get("/forms/billing", headers=h).status_code == 404

def test_purchase_is_client_only():
    for role in ("trainer", "nutritionist"):
        _, h = make_user(role)
        r = client.post("/purchases", headers=h, json={"content_type": "workout", "content_id": "whatever"})
        assert r.status_code == 403
        assert r.json()["detail"] == "Restricted Access"
