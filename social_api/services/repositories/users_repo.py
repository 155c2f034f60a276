"""Mongo repository for the `user` collection."""

from __future__ import annotations

from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorClientSession, AsyncIOMotorDatabase

from social_api.core.config import settings

PROJECTION = {'_id': 0}

# имена совпадают со scripts/create_indexes.py
USER_ID_INDEX = 'user_user_id'
USERNAME_INDEX = 'user_username'


class UsersRepo:
    """Lookups and relation-list updates on user documents."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self._col = db[settings.users_collection]

    @property
    def client(self):
        """Expose motor client to open transactions in services."""
        return self._col.database.client

    async def ensure_indexes(self) -> None:
        """Unique user_id and username."""
        await self._col.create_index(
            [('user_id', 1)], unique=True, name=USER_ID_INDEX)
        await self._col.create_index(
            [('username', 1)], unique=True, name=USERNAME_INDEX)

    # ----- READ -----

    async def get_by_id(
        self,
        user_id: int,
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> Optional[Dict[str, Any]]:
        return await self._col.find_one(
            {'user_id': user_id}, PROJECTION, session=session)

    async def get_by_username(
            self, username: str) -> Optional[Dict[str, Any]]:
        return await self._col.find_one({'username': username}, PROJECTION)

    async def exists(
        self,
        user_id: int,
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> bool:
        doc = await self._col.find_one(
            {'user_id': user_id}, {'_id': 1}, session=session)
        return doc is not None

    async def has_follower(
        self,
        followee_id: int,
        follower_id: int,
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> bool:
        """True if followee's `followers` already contains follower."""
        doc = await self._col.find_one(
            {'user_id': followee_id, 'followers': follower_id},
            {'_id': 1},
            session=session,
        )
        return doc is not None

    # ----- FOLLOW -----

    async def add_follower(
        self,
        followee_id: int,
        follower_id: int,
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> bool:
        """Increment follower_count and add to followers; False if no user."""
        res = await self._col.update_one(
            {'user_id': followee_id},
            {
                '$inc': {'follower_count': 1},
                '$addToSet': {'followers': follower_id},
            },
            session=session,
        )
        return res.matched_count == 1

    async def add_follow(
        self,
        follower_id: int,
        followee_id: int,
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> bool:
        """Increment follow_count and add to follows; False if no user."""
        res = await self._col.update_one(
            {'user_id': follower_id},
            {
                '$inc': {'follow_count': 1},
                '$addToSet': {'follows': followee_id},
            },
            session=session,
        )
        return res.matched_count == 1

    async def remove_follower(
        self,
        followee_id: int,
        follower_id: int,
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> bool:
        """Drop follower from followee; False if the edge was not there."""
        res = await self._col.update_one(
            {'user_id': followee_id, 'followers': follower_id},
            {
                '$inc': {'follower_count': -1},
                '$pull': {'followers': follower_id},
            },
            session=session,
        )
        return res.matched_count == 1

    async def remove_follow(
        self,
        follower_id: int,
        followee_id: int,
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> bool:
        res = await self._col.update_one(
            {'user_id': follower_id, 'follows': followee_id},
            {
                '$inc': {'follow_count': -1},
                '$pull': {'follows': followee_id},
            },
            session=session,
        )
        return res.matched_count == 1

    # ----- FAVORITES -----

    async def add_favorite(
        self,
        user_id: int,
        video_id: int,
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> bool:
        """Add video to favorite_list (set semantics); True if added."""
        res = await self._col.update_one(
            {'user_id': user_id},
            {'$addToSet': {'favorite_list': video_id}},
            session=session,
        )
        return res.modified_count == 1

    async def remove_favorite(
        self,
        user_id: int,
        video_id: int,
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> bool:
        """Pull every occurrence of video from favorite_list."""
        res = await self._col.update_one(
            {'user_id': user_id},
            {'$pull': {'favorite_list': video_id}},
            session=session,
        )
        return res.modified_count == 1
