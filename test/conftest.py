"""
Shared fixtures
Each test gets its own SQLite file and assets directory under tmp_path.
"""
import uuid
from typing import Dict

import pytest
from fastapi.testclient import TestClient

from app.context import AppContext
from app.main import create_app
from app.spec.models import Video
from app.utils import utc_now
from config.settings import Settings
from database import init_db

ASSETS_BASE_URL = "http://localhost:8091/assets"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_PATH=str(tmp_path / "data" / "videos.db"),
        ASSETS_ROOT=str(tmp_path / "assets"),
        ASSETS_BASE_URL=ASSETS_BASE_URL,
        JWT_SECRET_KEY="test-secret",
        LOG_DIR=str(tmp_path / "logs"),
    )


@pytest.fixture
def context(settings):
    context = AppContext.from_settings(settings)
    init_db(context.db)
    context.blobs.ensure_root()
    yield context
    context.db.close()


@pytest.fixture
def client(context):
    with TestClient(create_app(context)) as client:
        yield client


@pytest.fixture
def owner_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def other_user_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def video(context, owner_id) -> Video:
    now = utc_now()
    return context.videos.create(
        Video(
            id=uuid.uuid4(),
            userId=owner_id,
            title="Boot camp intro",
            description="First lesson",
            createdAt=now,
            updatedAt=now,
        )
    )


@pytest.fixture
def auth_headers(context):
    """Build an Authorization header for a user"""

    def _auth_headers(user_id: uuid.UUID) -> Dict[str, str]:
        token = context.authenticator.create_access_token(user_id)["token"]
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


@pytest.fixture
def stored_files(context):
    """List the file names currently in the assets root"""

    def _stored_files():
        return sorted(p.name for p in context.blobs.root.iterdir())

    return _stored_files
