from fitmarket.deps.storage import get_storage
from fitmarket.main import app
from fitmarket.storage import Bucket
from helpers import client, make_user
from fakes import RecordingStorage

YT = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"

def publish(headers, **fields):
    files = fields.pop("files", None)
    data = {"title": "Leg day", "description": "Squats and lunges", **fields}
    return client.post("/workouts", headers=headers, data=data, files=files)

def test_trainer_publishes_youtube_workout_and_badge_is_youtube():
    trainer, h = make_user("trainer", name="Tom Trainer")
    r = publish(h, video_url=YT)
    assert r.status_code == 201, r.text
    w = r.json()
    assert w["video_url"] == YT
    assert w["source"] == "youtube"
    assert w["author_id"] == trainer["id"]
    assert w["author_name"] == "Tom Trainer"

    listed = client.get(f"/workouts?author_id={trainer['id']}", headers=h).json()
    assert [x["id"] for x in listed] == [w["id"]]
    assert listed[0]["source"] == "youtube"

def test_uploaded_video_is_stored_and_served():
    trainer, h = make_user("trainer")
    r = publish(h, files={"video": ("clip.mp4", b"\x00\x00\x00\x18ftypmp42", "video/mp4")})
    assert r.status_code == 201, r.text
    w = r.json()
    assert w["source"] == "video"
    assert w["video_url"].startswith("http://testserver/media/videos/workout-")
    assert w["video_url"].endswith(".mp4")

    served = client.get(w["video_url"].replace("http://testserver", ""))
    assert served.status_code == 200
    assert served.content == b"\x00\x00\x00\x18ftypmp42"

def test_workouts_listed_newest_first():
    trainer, h = make_user("trainer")
    first = publish(h, title="First", video_url=YT).json()
    second = publish(h, title="Second", video_url=YT).json()
    listed = client.get(f"/workouts?author_id={trainer['id']}", headers=h).json()
    assert [x["id"] for x in listed] == [second["id"], first["id"]]

def test_client_and_nutritionist_cannot_publish_workout():
    for role in ("client", "nutritionist"):
        _, h = make_user(role)
        r = publish(h, video_url=YT)
        assert r.status_code == 403
        assert r.json()["detail"] == "Restricted Access"

def test_title_length_boundary():
    _, h = make_user("trainer")
    assert publish(h, title="x" * 100, video_url=YT).status_code == 201
    r = publish(h, title="x" * 101, video_url=YT)
    assert r.status_code == 422

def test_blank_title_rejected():
    _, h = make_user("trainer")
    assert publish(h, title="   ", video_url=YT).status_code == 422

def test_non_youtube_url_rejected():
    _, h = make_user("trainer")
    r = publish(h, video_url="https://vimeo.com/12345")
    assert r.status_code == 422

def test_needs_exactly_one_video_source():
    storage = RecordingStorage()
    app.dependency_overrides[get_storage] = lambda: storage
    _, h = make_user("trainer")

    r = publish(h)
    assert r.status_code == 422
    assert r.json()["detail"] == "Please provide a YouTube URL or a video file"

    r = publish(h, video_url=YT, files={"video": ("a.mp4", b"data", "video/mp4")})
    assert r.status_code == 422
    assert storage.uploads == []

def test_wrong_mime_rejected_before_upload():
    storage = RecordingStorage()
    app.dependency_overrides[get_storage] = lambda: storage
    trainer, h = make_user("trainer")
    r = publish(h, files={"video": ("notes.txt", b"hello", "text/plain")})
    assert r.status_code == 422
    assert r.json()["detail"] == "Please select a valid video file"
    assert storage.uploads == []
    assert client.get(f"/workouts?author_id={trainer['id']}", headers=h).json() == []

def test_invalid_title_with_file_never_uploads():
    storage = RecordingStorage()
    app.dependency_overrides[get_storage] = lambda: storage
    _, h = make_user("trainer")
    r = publish(h, title="x" * 101, files={"video": ("a.mp4", b"data", "video/mp4")})
    assert r.status_code == 422
    assert storage.uploads == []

def test_storage_failure_is_502_and_writes_nothing():
    storage = RecordingStorage(fail_upload="Bucket not found")
    app.dependency_overrides[get_storage] = lambda: storage
    trainer, h = make_user("trainer")
    r = publish(h, files={"video": ("a.mp4", b"data", "video/mp4")})
    assert r.status_code == 502
    assert r.json()["detail"] == "Error uploading video: Bucket not found"
    assert client.get(f"/workouts?author_id={trainer['id']}", headers=h).json() == []

def test_uploaded_object_lands_in_videos_bucket():
    storage = RecordingStorage()
    app.dependency_overrides[get_storage] = lambda: storage
    trainer, h = make_user("trainer")
    r = publish(h, files={"video": ("Clip.MOV", b"data", "video/quicktime")})
    assert r.status_code == 201, r.text
    assert len(storage.uploads) == 1
    bucket, name = storage.uploads[0]
    assert bucket == Bucket.videos
    assert name.startswith(f"workout-{trainer['id']}-") and name.endswith(".mov")
    assert r.json()["video_url"] == f"https://store.test/videos/{name}"
