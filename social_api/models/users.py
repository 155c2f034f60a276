from __future__ import annotations
from typing import List
from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Документ коллекции `user` (лишние поля монги игнорируем)."""
    model_config = ConfigDict(extra="ignore")

    user_id: int
    username: str
    follow_count: int = 0      # на скольких подписан
    follower_count: int = 0    # сколько подписчиков
    follows: List[int] = Field(default_factory=list)
    followers: List[int] = Field(default_factory=list)
    publish_list: List[int] = Field(default_factory=list)
    favorite_list: List[int] = Field(default_factory=list)


class FollowResponse(BaseModel):
    followee_id: int
    follower_id: int
    following: bool
