"""Tests for photo, comment and aggregation endpoints."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from fastapi.testclient import TestClient

from photo_share.api.app import create_app
from photo_share.containers import AppContainer
from tests.conftest import (
    InMemoryBlobStore,
    InMemoryPhotoRepository,
    login,
    register_user,
)


def _upload(client: TestClient, name: str = "beach.jpg") -> dict[str, str]:
    response = client.post(
        "/photos/new",
        files={"uploadedphoto": (name, b"\xff\xd8fake-jpeg", "image/jpeg")},
    )
    assert response.status_code == 200, response.text
    return response.json()


def _comment(client: TestClient, photo_id: str, text: str) -> dict[str, object]:
    response = client.post(f"/commentsOfPhoto/{photo_id}", json={"comment": text})
    assert response.status_code == 200, response.text
    return response.json()


def test_register_login_upload_comment_flow(
    container: AppContainer, blob_store: InMemoryBlobStore
) -> None:
    client = TestClient(create_app(container))
    alice = register_user(client)
    login(client)

    uploaded = _upload(client)
    created = _comment(client, uploaded["_id"], "nice!")
    response = client.get(f"/photo/{uploaded['_id']}")

    assert uploaded["user_id"] == alice["_id"]
    assert created["comment"] == "nice!"
    assert created["user_id"] == alice["_id"]
    assert response.status_code == 200
    photo = response.json()
    assert photo["_id"] == uploaded["_id"]
    assert photo["file_name"].startswith("U")
    assert photo["file_name"].endswith("beach.jpg")
    assert photo["file_name"] in blob_store.blobs
    assert len(photo["comments"]) == 1
    comment = photo["comments"][0]
    assert comment["_id"] == created["_id"]
    assert comment["comment"] == "nice!"
    assert comment["user"] == {
        "_id": alice["_id"],
        "first_name": "Alice",
        "last_name": "A",
    }


def test_comment_by_missing_user_resolves_to_unknown(
    container: AppContainer, photo_repository: InMemoryPhotoRepository
) -> None:
    client = TestClient(create_app(container))
    register_user(client)
    login(client)
    uploaded = _upload(client)
    photo_repository.append_comment(
        photo_id=UUID(uploaded["_id"]),
        user_id=uuid4(),
        comment="from a ghost",
        date_time=datetime.now(tz=UTC),
    )

    response = client.get(f"/photo/{uploaded['_id']}")

    assert response.status_code == 200
    assert response.json()["comments"][0]["user"] == {
        "_id": None,
        "first_name": "Unknown",
        "last_name": "User",
    }


def test_upload_without_file_is_bad_request(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    register_user(client)
    login(client)

    missing = client.post("/photos/new", data={"other": "field"})
    empty = client.post("/photos/new", files={"uploadedphoto": ("a.jpg", b"")})

    assert missing.status_code == 400
    assert empty.status_code == 400
    assert empty.json() == {"detail": "Error uploading file"}


def test_blank_comment_is_rejected(
    container: AppContainer, photo_repository: InMemoryPhotoRepository
) -> None:
    client = TestClient(create_app(container))
    register_user(client)
    login(client)
    uploaded = _upload(client)

    response = client.post(
        f"/commentsOfPhoto/{uploaded['_id']}", json={"comment": "   "}
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "Comment cannot be empty."}
    (photo,) = photo_repository.photos.values()
    assert photo.comments == ()


def test_comment_on_missing_photo_is_not_found(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    register_user(client)
    login(client)

    response = client.post(f"/commentsOfPhoto/{uuid4()}", json={"comment": "hi"})

    assert response.status_code == 404
    assert response.json() == {"detail": "Photo not found."}


def test_photo_detail_errors(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    register_user(client)
    login(client)

    assert client.get(f"/photo/{uuid4()}").status_code == 404
    assert client.get("/photo/not-an-id").status_code == 400


def test_photos_of_user(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    alice = register_user(client)
    bob = register_user(client, login_name="bob", first_name="Bob", last_name="B")
    login(client, "bob")
    first = _upload(client, "one.jpg")
    second = _upload(client, "two.jpg")
    client.post("/admin/logout")
    login(client)
    _comment(client, first["_id"], "great shot")

    response = client.get(f"/photosOfUser/{bob['_id']}")

    assert response.status_code == 200
    photos = response.json()
    assert [photo["_id"] for photo in photos] == [first["_id"], second["_id"]]
    assert photos[0]["user_id"] == bob["_id"]
    assert photos[0]["comments"][0]["user"]["_id"] == alice["_id"]
    assert photos[1]["comments"] == []
    assert client.get(f"/photosOfUser/{alice['_id']}").json() == []
    assert client.get("/photosOfUser/not-an-id").status_code == 400


def test_counts_and_comment_history(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    alice = register_user(client)
    bob = register_user(client, login_name="bob", first_name="Bob", last_name="B")
    register_user(client, login_name="carol", first_name="Carol", last_name="C")
    login(client)
    photo = _upload(client, "alice.jpg")
    _upload(client, "alice2.jpg")
    client.post("/admin/logout")
    login(client, "bob")
    _upload(client, "bob.jpg")
    first = _comment(client, photo["_id"], "first")
    second = _comment(client, photo["_id"], "second")

    photo_counts = client.get("/photo/counts").json()
    comment_counts = client.get("/comment/counts").json()
    history = client.get(f"/commentsByUser/{bob['_id']}").json()

    assert photo_counts == {alice["_id"]: 2, bob["_id"]: 1}
    assert comment_counts == {bob["_id"]: 2}
    assert [entry["_id"] for entry in history] == [first["_id"], second["_id"]]
    assert history[0]["text"] == "first"
    assert history[0]["photo"] == {
        "_id": photo["_id"],
        "file_name": history[0]["photo"]["file_name"],
        "user_id": alice["_id"],
    }
    assert history[0]["photo"]["file_name"].endswith("alice.jpg")
    assert client.get(f"/commentsByUser/{alice['_id']}").json() == []


def test_unexpected_storage_failure_is_generic_500(
    container: AppContainer, photo_repository: InMemoryPhotoRepository
) -> None:
    client = TestClient(create_app(container), raise_server_exceptions=False)
    register_user(client)
    login(client)

    def explode() -> list[object]:
        raise RuntimeError("connection reset by peer at 10.0.0.5")

    photo_repository.list_photos = explode  # type: ignore[method-assign]

    response = client.get("/photo/counts")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error."}
    assert "10.0.0.5" not in response.text
