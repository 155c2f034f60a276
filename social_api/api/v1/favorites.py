from http import HTTPStatus
from fastapi import APIRouter, Depends, Path

from social_api.api.http_utils import handle_data_errors
from social_api.dependencies import get_favorites_service, user_id_header
from social_api.models.videos import (
    FavoriteActionRequest, FavoriteActionResponse, FavoriteListResponse,
)
from social_api.services.favorites_service import FavoritesService

router = APIRouter(prefix="/api/v1/favorites", tags=["favorites"])


@router.post("/{video_id}", response_model=FavoriteActionResponse,
             status_code=HTTPStatus.OK)
@handle_data_errors()
async def favorite_action(
    body: FavoriteActionRequest,
    video_id: int = Path(..., gt=0),
    user_id: int = Depends(user_id_header),
    svc: FavoritesService = Depends(get_favorites_service),
):
    return await svc.favorite_action(user_id=user_id,
                                     video_id=video_id,
                                     action_type=body.action_type)


@router.get("", response_model=FavoriteListResponse,
            status_code=HTTPStatus.OK)
@handle_data_errors()
async def list_my_favorites(
    user_id: int = Depends(user_id_header),
    svc: FavoritesService = Depends(get_favorites_service),
):
    return await svc.list_favorites(user_id)


@router.get("/users/{user_id}", response_model=FavoriteListResponse,
            status_code=HTTPStatus.OK)
@handle_data_errors()
async def list_user_favorites(
    user_id: int = Path(..., gt=0),
    svc: FavoritesService = Depends(get_favorites_service),
):
    return await svc.list_favorites(user_id)
