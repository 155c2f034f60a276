"""Point lookups over user documents."""

from __future__ import annotations

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from social_api.core.exceptions import InfrastructureError, UserNotFoundError
from social_api.models.users import User
from social_api.services.repositories.users_repo import UsersRepo

logger = logging.getLogger(__name__)


class UsersService:
    """Lookup users by id or by username (login token)."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.repo = UsersRepo(db)

    async def get_user(self, user_id: int) -> User:
        try:
            doc = await self.repo.get_by_id(user_id)
        except PyMongoError as error:
            logger.error('user_lookup_failed',
                         extra={'user_id': user_id, 'err': str(error)})
            raise InfrastructureError.wrap('user_get', error) from error
        if doc is None:
            logger.info('user_not_found', extra={'user_id': user_id})
            raise UserNotFoundError(details={'user_id': user_id})
        return User.model_validate(doc)

    async def get_user_by_username(self, username: str) -> User:
        """Exact match on the unique username (used as login token)."""
        try:
            doc = await self.repo.get_by_username(username)
        except PyMongoError as error:
            logger.error('user_lookup_failed',
                         extra={'username': username, 'err': str(error)})
            raise InfrastructureError.wrap('user_get', error) from error
        if doc is None:
            logger.info('user_not_found', extra={'username': username})
            raise UserNotFoundError(details={'username': username})
        return User.model_validate(doc)
