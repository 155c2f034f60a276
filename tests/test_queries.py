import pytest

from social_api.core.exceptions import UserNotFoundError, VideoNotFoundError


async def test_get_user_by_id(store, users_service):
    store.add_user(1, username="alice", follow_count=2)

    user = await users_service.get_user(1)

    assert user.username == "alice"
    assert user.follow_count == 2


async def test_get_user_missing(users_service):
    with pytest.raises(UserNotFoundError) as e:
        await users_service.get_user(7)
    assert e.value.details == {"user_id": 7}


async def test_get_user_by_username(store, users_service):
    store.add_user(3, username="token-abc")

    user = await users_service.get_user_by_username("token-abc")

    assert user.user_id == 3


async def test_get_user_by_username_missing(users_service):
    with pytest.raises(UserNotFoundError):
        await users_service.get_user_by_username("nobody")


async def test_find_video_returns_none_when_absent(videos_service):
    assert await videos_service.find_video(10) is None


async def test_find_video_keeps_extra_fields(store, videos_service):
    store.add_video(10, favorite_count=4, play_url="http://cdn/10.mp4")

    video = await videos_service.find_video(10)

    assert video.favorite_count == 4
    assert video.model_dump()["play_url"] == "http://cdn/10.mp4"


async def test_get_video_raises_when_absent(videos_service):
    with pytest.raises(VideoNotFoundError):
        await videos_service.get_video(10)
