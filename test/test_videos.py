"""
Video metadata API and repository tests
"""
import uuid

import pytest

from app.spec.models import Video
from database.repositories import VideoNotFoundError


class TestVideoRepository:
    def test_get_returns_created_video(self, context, video):
        assert context.videos.get(video.id) == video

    def test_get_missing_video(self, context):
        with pytest.raises(VideoNotFoundError):
            context.videos.get(uuid.uuid4())

    def test_update_writes_fields_in_place(self, context, video):
        changed = video.model_copy(
            update={"thumbnailUrl": "http://localhost:8091/assets/x.png", "updatedAt": "later"}
        )

        context.videos.update(changed)

        stored = context.videos.get(video.id)
        assert stored.thumbnailUrl == "http://localhost:8091/assets/x.png"
        assert stored.updatedAt == "later"
        assert stored.createdAt == video.createdAt

    def test_update_missing_video(self, context, video):
        ghost = video.model_copy(update={"id": uuid.uuid4()})

        with pytest.raises(VideoNotFoundError):
            context.videos.update(ghost)

    def test_list_by_user_only_returns_owned_videos(self, context, video, other_user_id):
        context.videos.create(
            Video(
                id=uuid.uuid4(),
                userId=other_user_id,
                title="Someone else's",
                createdAt="2026-01-01T00:00:00Z",
                updatedAt="2026-01-01T00:00:00Z",
            )
        )

        owned = context.videos.list_by_user(video.userId)

        assert [v.id for v in owned] == [video.id]

    def test_delete(self, context, video):
        assert context.videos.delete(video.id) is True
        assert context.videos.delete(video.id) is False


class TestVideosApi:
    def test_create_and_fetch(self, client, owner_id, auth_headers):
        r = client.post(
            "/api/videos",
            headers=auth_headers(owner_id),
            json={"title": "Launch day", "description": "Keynote"},
        )

        assert r.status_code == 201
        created = r.json()
        assert created["userId"] == str(owner_id)
        assert created["thumbnailUrl"] is None

        fetched = client.get(f"/api/videos/{created['id']}", headers=auth_headers(owner_id))
        assert fetched.status_code == 200
        assert fetched.json() == created

    def test_create_requires_auth(self, client):
        r = client.post("/api/videos", json={"title": "Nope"})

        assert r.status_code == 401
        assert r.json()["error"]["code"] == "UNAUTHENTICATED"

    def test_list_returns_callers_videos(self, client, video, owner_id, other_user_id, auth_headers):
        mine = client.get("/api/videos", headers=auth_headers(owner_id))
        theirs = client.get("/api/videos", headers=auth_headers(other_user_id))

        assert [v["id"] for v in mine.json()] == [str(video.id)]
        assert theirs.json() == []

    def test_get_bad_id(self, client, owner_id, auth_headers):
        r = client.get("/api/videos/123", headers=auth_headers(owner_id))

        assert r.status_code == 400

    def test_get_missing(self, client, owner_id, auth_headers):
        r = client.get(f"/api/videos/{uuid.uuid4()}", headers=auth_headers(owner_id))

        assert r.status_code == 404
        assert r.json()["error"]["code"] == "NOT_FOUND"

    def test_get_by_non_owner(self, client, video, other_user_id, auth_headers):
        r = client.get(f"/api/videos/{video.id}", headers=auth_headers(other_user_id))

        assert r.status_code == 401
        assert r.json()["error"] == {"code": "UNAUTHORIZED", "message": "You can't view this video"}
        assert video.title not in r.text

    def test_delete_by_non_owner(self, client, context, video, other_user_id, auth_headers):
        r = client.delete(f"/api/videos/{video.id}", headers=auth_headers(other_user_id))

        assert r.status_code == 401
        assert context.videos.get(video.id) == video

    def test_delete_by_owner(self, client, context, video, owner_id, auth_headers):
        r = client.delete(f"/api/videos/{video.id}", headers=auth_headers(owner_id))

        assert r.status_code == 204
        with pytest.raises(VideoNotFoundError):
            context.videos.get(video.id)


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
