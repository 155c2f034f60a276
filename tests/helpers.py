from typing import Dict
from httpx import AsyncClient


def uid_header(user_id: int) -> Dict[str, str]:
    return {"X-User-Id": str(user_id)}


async def read_user(client: AsyncClient, user_id: int) -> dict:
    r = await client.get(f"/api/v1/users/{user_id}")
    assert r.status_code == 200
    return r.json()


async def read_video(client: AsyncClient, video_id: int) -> dict:
    r = await client.get(f"/api/v1/videos/{video_id}")
    assert r.status_code == 200
    return r.json()
