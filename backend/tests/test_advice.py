from fitmarket.db import SessionLocal
from fitmarket.models import Advice
from helpers import client, make_user

def advice_count():
    with SessionLocal() as db:
        return db.query(Advice).count()

def test_trainer_posts_general_advice():
    trainer, h = make_user("trainer", name="Tara Trainer")
    r = client.post("/advice", headers=h, json={
        "title": "Warm up first", "body": "Ten minutes of mobility before lifting.", "category": "general"})
    assert r.status_code == 201, r.text
    a = r.json()
    assert a["category"] == "general"
    assert a["category_label"] == "General"
    assert a["author_role_label"] == "Trainer"
    assert a["author_name"] == "Tara Trainer"
    assert a["video_url"] is None

def test_missing_category_reads_as_general():
    _, h = make_user("nutritionist")
    r = client.post("/advice", headers=h, json={"title": "Drink water", "body": "Two litres a day."})
    assert r.status_code == 201
    assert r.json()["category"] is None
    assert r.json()["category_label"] == "General"

def test_role_specific_categories():
    _, trainer_h = make_user("trainer")
    _, nut_h = make_user("nutritionist")
    ok = client.post("/advice", headers=nut_h, json={"title": "t", "body": "b", "category": "hydration"})
    assert ok.status_code == 201
    assert ok.json()["category_label"] == "Hydration"
    r = client.post("/advice", headers=trainer_h, json={"title": "t", "body": "b", "category": "hydration"})
    assert r.status_code == 422

def test_client_cannot_post_advice_and_nothing_is_written():
    _, h = make_user("client")
    before = advice_count()
    r = client.post("/advice", headers=h, json={"title": "Tip", "body": "Sleep more."})
    assert r.status_code == 403
    assert r.json()["detail"] == "Restricted Access"
    assert advice_count() == before

def test_advice_video_must_be_youtube():
    _, h = make_user("trainer")
    ok = client.post("/advice", headers=h, json={"title": "t", "body": "b", "video_url": "youtu.be/xyz"})
    assert ok.status_code == 201
    bad = client.post("/advice", headers=h, json={"title": "t", "body": "b", "video_url": "https://example.com/v"})
    assert bad.status_code == 422

def test_advice_body_limit():
    _, h = make_user("trainer")
    assert client.post("/advice", headers=h, json={"title": "t", "body": "b" * 2000}).status_code == 201
    assert client.post("/advice", headers=h, json={"title": "t", "body": "b" * 2001}).status_code == 422

def test_advice_listing_filters_by_author():
    trainer, h = make_user("trainer")
    client.post("/advice", headers=h, json={"title": "one", "body": "b"})
    client.post("/advice", headers=h, json={"title": "two", "body": "b"})
    listed = client.get(f"/advice?author_id={trainer['id']}", headers=h).json()
    assert [a["title"] for a in listed] == ["two", "one"]
