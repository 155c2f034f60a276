import os
from unittest.mock import MagicMock

import pytest
from httpx import AsyncClient, ASGITransport

from social_api.core.config import settings
from social_api.dependencies import (
    get_favorites_service,
    get_relations_service,
    get_users_service,
    get_videos_service,
)
from social_api.main import app
from social_api.services.favorites_service import FavoritesService
from social_api.services.relations_service import RelationsService
from social_api.services.users_service import UsersService
from social_api.services.videos_service import VideosService
from tests.fakes import FakeClient, FakeStore, FakeUsersRepo, FakeVideosRepo


@pytest.fixture(scope="session", autouse=True)
def test_env():
    os.environ["SENTRY_DSN"] = ""  # отключаем Sentry
    settings.sentry_dsn = ""


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def fake_client(store) -> FakeClient:
    return FakeClient(store)


@pytest.fixture
def users_service(store, fake_client) -> UsersService:
    svc = UsersService(MagicMock())
    svc.repo = FakeUsersRepo(store, fake_client)
    return svc


@pytest.fixture
def videos_service(store, fake_client) -> VideosService:
    svc = VideosService(MagicMock())
    svc.repo = FakeVideosRepo(store, fake_client)
    return svc


@pytest.fixture
def relations_service(store, fake_client) -> RelationsService:
    svc = RelationsService(MagicMock())
    svc.repo = FakeUsersRepo(store, fake_client)
    return svc


@pytest.fixture
def favorites_service(store, fake_client, users_service) -> FavoritesService:
    svc = FavoritesService(MagicMock(), users_service)
    svc.users_repo = FakeUsersRepo(store, fake_client)
    svc.videos_repo = FakeVideosRepo(store, fake_client)
    return svc


@pytest.fixture
async def client(users_service, videos_service,
                 relations_service, favorites_service):
    """HTTP-клиент поверх in-memory сервисов (lifespan/монгу не поднимаем)."""
    app.dependency_overrides[get_users_service] = lambda: users_service
    app.dependency_overrides[get_videos_service] = lambda: videos_service
    app.dependency_overrides[get_relations_service] = \
        lambda: relations_service
    app.dependency_overrides[get_favorites_service] = \
        lambda: favorites_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport,
                           base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
