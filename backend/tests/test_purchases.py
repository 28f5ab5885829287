from fitmarket.db import SessionLocal
from fitmarket.models import ContentType
from fitmarket.repositories.purchase_repo import PurchaseRepository
from helpers import client, make_user

YT = "https://youtube.com/watch?v=abc"

def publish_workout(title="Full body"):
    _, h = make_user("trainer", name="Coach Carter")
    r = client.post("/workouts", headers=h, data={"title": title, "description": "Three rounds", "video_url": YT})
    assert r.status_code == 201, r.text
    return r.json()

def test_catalog_lists_content_with_price():
    w = publish_workout()
    _, h = make_user("client")
    r = client.get("/purchases/catalog?content_type=workout", headers=h)
    assert r.status_code == 200
    item = next(i for i in r.json() if i["id"] == w["id"])
    assert item["price"] == 29.99
    assert item["author_name"] == "Coach Carter"
    assert item["content_type"] == "workout"

def test_nutrition_catalog_price():
    _, nh = make_user("nutritionist")
    client.post("/nutrition-plans", headers=nh, data={"title": "p", "description": "d"},
                files={"document": ("p.pdf", b"%PDF-1.4", "application/pdf")})
    _, h = make_user("client")
    items = client.get("/purchases/catalog?content_type=nutrition", headers=h).json()
    assert items and all(i["price"] == 24.99 for i in items)

def test_catalog_requires_known_type():
    _, h = make_user("client")
    assert client.get("/purchases/catalog?content_type=advice", headers=h).status_code == 422

def test_client_buys_workout():
    w = publish_workout("Bought plan")
    buyer, h = make_user("client")
    r = client.post("/purchases", headers=h, json={"content_type": "workout", "content_id": w["id"]})
    assert r.status_code == 201, r.text
    p = r.json()
    assert p["buyer_id"] == buyer["id"]
    assert p["content_type"] == "workout"
    assert p["type_label"] == "Workout Plan"
    assert p["display_title"] == "Bought plan"
    assert p["details"]["author_name"] == "Coach Carter"

    history = client.get("/purchases", headers=h).json()
    assert [x["id"] for x in history] == [p["id"]]

def test_purchase_of_missing_content_is_404():
    _, h = make_user("client")
    r = client.post("/purchases", headers=h, json={"content_type": "nutrition", "content_id": "no-such-plan"})
    assert r.status_code == 404
    assert client.get("/purchases", headers=h).json() == []

def test_duplicate_purchases_are_kept():
    w = publish_workout()
    _, h = make_user("client")
    for _ in range(2):
        assert client.post("/purchases", headers=h,
                           json={"content_type": "workout", "content_id": w["id"]}).status_code == 201
    history = client.get("/purchases", headers=h).json()
    assert len(history) == 2
    assert {x["content_id"] for x in history} == {w["id"]}

def test_dangling_purchase_shows_plan_not_found():
    buyer, h = make_user("client")
    with SessionLocal() as db:
        PurchaseRepository(db).create(buyer_id=buyer["id"], content_type=ContentType.nutrition, content_id="X")
    history = client.get("/purchases", headers=h).json()
    assert len(history) == 1
    assert history[0]["details"] is None
    assert history[0]["display_title"] == "Plan not found"
    assert history[0]["type_label"] == "Nutrition Plan"

def test_history_resolves_mixed_types_newest_first():
    w = publish_workout("Mixed workout")
    _, nh = make_user("nutritionist")
    plan = client.post("/nutrition-plans", headers=nh, data={"title": "Mixed plan", "description": "d"},
                       files={"document": ("p.pdf", b"%PDF-1.4", "application/pdf")}).json()
    _, h = make_user("client")
    client.post("/purchases", headers=h, json={"content_type": "workout", "content_id": w["id"]})
    client.post("/purchases", headers=h, json={"content_type": "nutrition", "content_id": plan["id"]})
    titles = [x["display_title"] for x in client.get("/purchases", headers=h).json()]
    assert titles == ["Mixed plan", "Mixed workout"]

def test_long_history_is_complete_in_list_and_dashboard():
    w = publish_workout("Popular plan")
    buyer, h = make_user("client")
    with SessionLocal() as db:
        repo = PurchaseRepository(db)
        for _ in range(120):
            repo.create(buyer_id=buyer["id"], content_type=ContentType.workout, content_id=w["id"])

    history = client.get("/purchases", headers=h).json()
    assert len(history) == 120
    assert all(x["display_title"] == "Popular plan" for x in history)

    d = client.get("/dashboard", headers=h).json()
    assert d["stats"]["total_purchases"] == 120
    assert d["workout_purchases"] == 120
    assert len(d["purchases"]) == 120

    page = client.get("/purchases?limit=50&offset=100", headers=h).json()
    assert len(page) == 20

def test_catalog_paging():
    _, th = make_user("trainer")
    ids = [client.post("/workouts", headers=th, data={"title": f"p{i}", "description": "d", "video_url": YT}).json()["id"]
           for i in range(3)]
    _, h = make_user("client")
    first = client.get("/purchases/catalog?content_type=workout&limit=2", headers=h).json()
    second = client.get("/purchases/catalog?content_type=workout&limit=2&offset=2", headers=h).json()
    assert [i["id"] for i in first] == ids[::-1][:2]
    assert second[0]["id"] == ids[0]
    assert client.get("/purchases/catalog?content_type=workout&limit=0", headers=h).status_code == 422
