"""Service layer for user -> video favorites (likes)."""

from __future__ import annotations

import logging
from typing import List

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from social_api.core.exceptions import (
    InfrastructureError,
    UserNotFoundError,
    VideoNotFoundError,
)
from social_api.db.mongo import transaction
from social_api.models.videos import (
    FavoriteAction,
    FavoriteActionResponse,
    FavoriteListResponse,
    Video,
)
from social_api.services.repositories.users_repo import UsersRepo
from social_api.services.repositories.videos_repo import VideosRepo
from social_api.services.users_service import UsersService

logger = logging.getLogger(__name__)


class FavoritesService:
    """Toggle favorites: user.favorite_list + video.favorites + counter.

    Membership and favorite_count change in the same statement on the
    video document, so the counter equals len(favorites). A repeated like
    is a no-op, same as a repeated follow.
    """

    def __init__(
            self,
            db: AsyncIOMotorDatabase,
            users: UsersService) -> None:
        """Initialize repositories and the user lookup dependency."""
        self.users_repo = UsersRepo(db)
        self.videos_repo = VideosRepo(db)
        self.users = users

    async def favorite_action(
        self,
        user_id: int,
        video_id: int,
        action_type: int,
    ) -> FavoriteActionResponse:
        """action_type == 1 likes, anything else unlikes."""
        if action_type == FavoriteAction.like:
            applied = await self.like(user_id, video_id)
        else:
            applied = await self.cancel_like(user_id, video_id)
        return FavoriteActionResponse(ok=True, applied=applied)

    async def _ensure_exists(self, user_id: int, video_id: int, session):
        if not await self.users_repo.exists(user_id, session=session):
            logger.info('favorite_user_missing', extra={'user_id': user_id})
            raise UserNotFoundError(details={'user_id': user_id})
        if not await self.videos_repo.exists(video_id, session=session):
            logger.info('favorite_video_missing',
                        extra={'video_id': video_id})
            raise VideoNotFoundError(details={'video_id': video_id})

    async def like(self, user_id: int, video_id: int) -> bool:
        """Add favorite edge; False if both sides already had it."""
        ctx = {'user_id': user_id, 'video_id': video_id}
        try:
            async with transaction(self.users_repo.client) as session:
                await self._ensure_exists(user_id, video_id, session)
                user_added = await self.users_repo.add_favorite(
                    user_id, video_id, session=session)
                video_added = await self.videos_repo.add_favorite(
                    video_id, user_id, session=session)
                applied = user_added or video_added
        except PyMongoError as error:
            logger.error('favorite_failed', extra={**ctx, 'err': str(error)})
            raise InfrastructureError.wrap('favorite', error) from error

        logger.info('favorite_added' if applied else 'favorite_repeated',
                    extra=ctx)
        return applied

    async def cancel_like(self, user_id: int, video_id: int) -> bool:
        """Remove favorite edge; False if neither side had it."""
        ctx = {'user_id': user_id, 'video_id': video_id}
        try:
            async with transaction(self.users_repo.client) as session:
                await self._ensure_exists(user_id, video_id, session)
                user_removed = await self.users_repo.remove_favorite(
                    user_id, video_id, session=session)
                # счётчик уменьшаем только вместе с удалением из favorites
                video_removed = await self.videos_repo.remove_favorite(
                    video_id, user_id, session=session)
                applied = user_removed or video_removed
        except PyMongoError as error:
            logger.error('favorite_cancel_failed',
                         extra={**ctx, 'err': str(error)})
            raise InfrastructureError.wrap('favorite_cancel', error) from error

        logger.info('favorite_removed' if applied else 'favorite_absent',
                    extra=ctx)
        return applied

    async def list_favorites(self, user_id: int) -> FavoriteListResponse:
        """Videos from user's favorite_list, in list order.

        Ids whose video no longer exists are returned in `missing`.
        """
        user = await self.users.get_user(user_id)
        try:
            docs = await self.videos_repo.get_many(user.favorite_list)
        except PyMongoError as error:
            logger.error('favorite_list_failed',
                         extra={'user_id': user_id, 'err': str(error)})
            raise InfrastructureError.wrap('favorite_list', error) from error

        by_id = {doc['video_id']: doc for doc in docs}
        items: List[Video] = []
        missing: List[int] = []
        for video_id in user.favorite_list:
            doc = by_id.get(video_id)
            if doc is None:
                missing.append(video_id)
            else:
                items.append(Video.model_validate(doc))
        if missing:
            logger.warning('favorite_videos_missing',
                           extra={'user_id': user_id, 'video_ids': missing})
        return FavoriteListResponse(
            items=items, missing=missing, total=len(items))
