"""Mongo repository for the `video` collection."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from motor.motor_asyncio import AsyncIOMotorClientSession, AsyncIOMotorDatabase

from social_api.core.config import settings

PROJECTION = {'_id': 0}

VIDEO_ID_INDEX = 'video_video_id'


class VideosRepo:
    """Lookups and favorite updates on video documents."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self._col = db[settings.videos_collection]

    @property
    def client(self):
        return self._col.database.client

    async def ensure_indexes(self) -> None:
        await self._col.create_index(
            [('video_id', 1)], unique=True, name=VIDEO_ID_INDEX)

    async def get_by_id(
        self,
        video_id: int,
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> Optional[Dict[str, Any]]:
        return await self._col.find_one(
            {'video_id': video_id}, PROJECTION, session=session)

    async def get_many(self, video_ids: Iterable[int]) -> List[Dict[str, Any]]:
        """Fetch videos by ids in one round-trip (order not guaranteed)."""
        ids = list(set(video_ids))
        if not ids:
            return []
        cur = self._col.find({'video_id': {'$in': ids}}, PROJECTION)
        return [d async for d in cur]

    async def exists(
        self,
        video_id: int,
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> bool:
        doc = await self._col.find_one(
            {'video_id': video_id}, {'_id': 1}, session=session)
        return doc is not None

    async def add_favorite(
        self,
        video_id: int,
        user_id: int,
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> bool:
        """Push user into favorites and +1 the counter in one statement.

        Matches only when the user is not in favorites yet, so the counter
        moves together with membership. Returns True if applied.
        """
        res = await self._col.update_one(
            {'video_id': video_id, 'favorites': {'$ne': user_id}},
            {
                '$push': {'favorites': user_id},
                '$inc': {'favorite_count': 1},
            },
            session=session,
        )
        return res.modified_count == 1

    async def remove_favorite(
        self,
        video_id: int,
        user_id: int,
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> bool:
        """Pull user from favorites and -1 the counter, clamped at zero.

        Pipeline update: both fields change in one atomic statement.
        """
        res = await self._col.update_one(
            {'video_id': video_id, 'favorites': user_id},
            [
                {'$set': {
                    'favorites': {'$filter': {
                        'input': '$favorites',
                        'cond': {'$ne': ['$$this', user_id]},
                    }},
                    'favorite_count': {'$max': [
                        {'$subtract': ['$favorite_count', 1]}, 0,
                    ]},
                }},
            ],
            session=session,
        )
        return res.modified_count == 1
