from http import HTTPStatus
from fastapi import APIRouter, Depends, Path

from social_api.api.http_utils import handle_data_errors
from social_api.dependencies import get_videos_service
from social_api.models.videos import Video
from social_api.services.videos_service import VideosService

router = APIRouter(prefix="/api/v1/videos", tags=["videos"])


@router.get("/{video_id}", response_model=Video, status_code=HTTPStatus.OK)
@handle_data_errors()
async def get_video(
    video_id: int = Path(..., gt=0),
    svc: VideosService = Depends(get_videos_service),
):
    return await svc.get_video(video_id)
