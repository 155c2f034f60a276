"""Service layer for follow edges between users."""

from __future__ import annotations

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from social_api.core.exceptions import (
    DuplicateRelationError,
    InfrastructureError,
    NotFoundError,
)
from social_api.db.mongo import transaction
from social_api.models.users import FollowResponse
from social_api.services.repositories.users_repo import UsersRepo

logger = logging.getLogger(__name__)


class RelationsService:
    """Follow edge stored on both ends: follower.follows, followee.followers.

    Both sides are written inside one transaction, so readers never see
    one side without the other.
    """

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        """Initialize repository."""
        self.repo = UsersRepo(db)

    async def follow(
            self,
            followee_id: int,
            follower_id: int) -> FollowResponse:
        """Create follow edge; DuplicateRelationError on follow again."""
        ctx = {'followee_id': followee_id, 'follower_id': follower_id}
        try:
            async with transaction(self.repo.client) as session:
                if await self.repo.has_follower(
                        followee_id, follower_id, session=session):
                    logger.info('follow_duplicate', extra=ctx)
                    raise DuplicateRelationError('follow_again', details=ctx)

                # 1) followee: +1 follower, add to followers
                if not await self.repo.add_follower(
                        followee_id, follower_id, session=session):
                    logger.info('followee_not_found', extra=ctx)
                    raise NotFoundError('followee_not_found', details=ctx)

                # 2) follower: +1 follow, add to follows
                if not await self.repo.add_follow(
                        follower_id, followee_id, session=session):
                    # исключение откатит шаг 1
                    logger.info('follower_not_found', extra=ctx)
                    raise NotFoundError('follower_not_found', details=ctx)
        except PyMongoError as error:
            logger.error('follow_failed', extra={**ctx, 'err': str(error)})
            raise InfrastructureError.wrap('follow', error) from error

        logger.info('follow_created', extra=ctx)
        return FollowResponse(following=True, **ctx)

    async def unfollow(
            self,
            followee_id: int,
            follower_id: int) -> FollowResponse:
        """Remove follow edge from both users."""
        ctx = {'followee_id': followee_id, 'follower_id': follower_id}
        try:
            async with transaction(self.repo.client) as session:
                if not await self.repo.remove_follower(
                        followee_id, follower_id, session=session):
                    code = 'follow_relation_not_found'
                    if not await self.repo.exists(
                            followee_id, session=session):
                        code = 'followee_not_found'
                    logger.info(code, extra=ctx)
                    raise NotFoundError(code, details=ctx)

                if not await self.repo.remove_follow(
                        follower_id, followee_id, session=session):
                    code = 'follow_relation_not_found'
                    if not await self.repo.exists(
                            follower_id, session=session):
                        code = 'follower_not_found'
                    logger.info(code, extra=ctx)
                    raise NotFoundError(code, details=ctx)
        except PyMongoError as error:
            logger.error('unfollow_failed', extra={**ctx, 'err': str(error)})
            raise InfrastructureError.wrap('unfollow', error) from error

        logger.info('follow_removed', extra=ctx)
        return FollowResponse(following=False, **ctx)

    async def is_following(self, followee_id: int, follower_id: int) -> bool:
        """True if follower is in followee's followers."""
        try:
            return await self.repo.has_follower(followee_id, follower_id)
        except PyMongoError as error:
            logger.error('follow_get_failed', extra={
                'followee_id': followee_id,
                'follower_id': follower_id,
                'err': str(error),
            })
            raise InfrastructureError.wrap('follow_get', error) from error
