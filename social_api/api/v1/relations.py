from http import HTTPStatus
from fastapi import APIRouter, Depends, Path

from social_api.api.http_utils import handle_data_errors
from social_api.dependencies import get_relations_service, user_id_header
from social_api.models.users import FollowResponse
from social_api.services.relations_service import RelationsService

router = APIRouter(prefix="/api/v1/relations", tags=["relations"])


@router.get("/{followee_id}", response_model=FollowResponse,
            status_code=HTTPStatus.OK)
@handle_data_errors()
async def get_follow_state(
    followee_id: int = Path(..., gt=0),
    user_id: int = Depends(user_id_header),
    svc: RelationsService = Depends(get_relations_service),
):
    following = await svc.is_following(followee_id, user_id)
    return FollowResponse(followee_id=followee_id, follower_id=user_id,
                          following=following)


@router.post("/{followee_id}", response_model=FollowResponse,
             status_code=HTTPStatus.CREATED)
@handle_data_errors()
async def follow(
    followee_id: int = Path(..., gt=0),
    user_id: int = Depends(user_id_header),
    svc: RelationsService = Depends(get_relations_service),
):
    return await svc.follow(followee_id=followee_id, follower_id=user_id)


@router.delete("/{followee_id}", response_model=FollowResponse,
               status_code=HTTPStatus.OK)
@handle_data_errors()
async def unfollow(
    followee_id: int = Path(..., gt=0),
    user_id: int = Depends(user_id_header),
    svc: RelationsService = Depends(get_relations_service),
):
    return await svc.unfollow(followee_id=followee_id, follower_id=user_id)
