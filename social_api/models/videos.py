from __future__ import annotations
from enum import IntEnum
from typing import List
from pydantic import BaseModel, ConfigDict, Field


class Video(BaseModel):
    """Документ коллекции `video`.

    Остальные поля видео (автор, url, ...) ведёт другой сервис —
    пропускаем их как есть.
    """
    model_config = ConfigDict(extra="allow")

    video_id: int
    favorite_count: int = 0
    favorites: List[int] = Field(default_factory=list)


class FavoriteAction(IntEnum):
    like = 1
    unlike = 2


class FavoriteActionRequest(BaseModel):
    # 1 — лайк, любое другое значение — снять лайк
    action_type: int = Field(..., description="1 = like, other = unlike")


class FavoriteActionResponse(BaseModel):
    ok: bool
    applied: bool  # False — состояние уже было таким


class FavoriteListResponse(BaseModel):
    items: List[Video]
    missing: List[int] = Field(default_factory=list)
    total: int
