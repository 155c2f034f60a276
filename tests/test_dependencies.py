import pytest
from fastapi import HTTPException

from social_api.dependencies import user_id_header


def test_user_id_header_parses_int():
    assert user_id_header("42") == 42


@pytest.mark.parametrize("raw", ["not-a-number", "0", "-3"])
def test_user_id_header_invalid_returns_422(raw):
    with pytest.raises(HTTPException) as e:
        user_id_header(raw)
    assert e.value.status_code == 422


async def test_missing_user_id_header_returns_422_on_endpoint(client):
    # любой эндпоинт с Depends(user_id_header), напр. relations.post
    r = await client.post("/api/v1/relations/1")
    assert r.status_code == 422
