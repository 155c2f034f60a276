"""Point lookups over video documents."""

from __future__ import annotations

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from social_api.core.exceptions import InfrastructureError, VideoNotFoundError
from social_api.models.videos import Video
from social_api.services.repositories.videos_repo import VideosRepo

logger = logging.getLogger(__name__)


class VideosService:
    """Two lookup flavours: `find_video` (None if absent), `get_video` (raises)."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.repo = VideosRepo(db)

    async def find_video(self, video_id: int) -> Optional[Video]:
        """Return the video or None; never a zero-value placeholder."""
        try:
            doc = await self.repo.get_by_id(video_id)
        except PyMongoError as error:
            logger.error('video_lookup_failed',
                         extra={'video_id': video_id, 'err': str(error)})
            raise InfrastructureError.wrap('video_get', error) from error
        return None if doc is None else Video.model_validate(doc)

    async def get_video(self, video_id: int) -> Video:
        video = await self.find_video(video_id)
        if video is None:
            logger.info('video_not_found', extra={'video_id': video_id})
            raise VideoNotFoundError(details={'video_id': video_id})
        return video
