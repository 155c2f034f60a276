from http import HTTPStatus
import pytest
from fastapi import HTTPException
from pymongo.errors import PyMongoError

from social_api.api.http_utils import handle_data_errors
from social_api.core.exceptions import (
    DuplicateRelationError,
    InfrastructureError,
    VideoNotFoundError,
)


async def test_duplicate_maps_to_409():
    @handle_data_errors()
    async def fn():
        raise DuplicateRelationError()
    with pytest.raises(HTTPException) as e:
        await fn()
    assert e.value.status_code == HTTPStatus.CONFLICT
    assert e.value.detail == "follow_again"


async def test_not_found_subclass_maps_to_404():
    @handle_data_errors()
    async def fn():
        raise VideoNotFoundError()
    with pytest.raises(HTTPException) as e:
        await fn()
    assert e.value.status_code == HTTPStatus.NOT_FOUND
    assert e.value.detail == "video_not_found"


async def test_infrastructure_error_hides_driver_message():
    @handle_data_errors()
    async def fn():
        raise InfrastructureError.wrap("follow", PyMongoError("secret"))
    with pytest.raises(HTTPException) as e:
        await fn()
    assert e.value.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert e.value.detail == "internal_error"


async def test_unknown_runtime_error_maps_to_500():
    @handle_data_errors()
    async def fn():
        raise RuntimeError("something else")
    with pytest.raises(HTTPException) as e:
        await fn()
    assert e.value.status_code == HTTPStatus.INTERNAL_SERVER_ERROR


async def test_happy_path_returns_value():
    @handle_data_errors()
    async def ok():
        return "ok"
    assert await ok() == "ok"


def test_infrastructure_error_message_keeps_driver_text():
    err = InfrastructureError.wrap("favorite", PyMongoError("boom"))
    assert err.code == "mongo_favorite_error"
    assert str(err) == "mongo_favorite_error: boom"
