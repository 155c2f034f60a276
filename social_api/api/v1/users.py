from http import HTTPStatus
from fastapi import APIRouter, Depends, Path

from social_api.api.http_utils import handle_data_errors
from social_api.dependencies import get_users_service
from social_api.models.users import User
from social_api.services.users_service import UsersService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("/by-name/{username}", response_model=User,
            status_code=HTTPStatus.OK)
@handle_data_errors()
async def get_user_by_username(
    username: str = Path(..., min_length=1),
    svc: UsersService = Depends(get_users_service),
):
    return await svc.get_user_by_username(username)


@router.get("/{user_id}", response_model=User, status_code=HTTPStatus.OK)
@handle_data_errors()
async def get_user(
    user_id: int = Path(..., gt=0),
    svc: UsersService = Depends(get_users_service),
):
    return await svc.get_user(user_id)
