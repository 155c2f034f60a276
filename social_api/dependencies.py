from fastapi import Depends, Header, HTTPException, status
from motor.motor_asyncio import AsyncIOMotorDatabase
from social_api.db.mongo import get_mongo_db
from social_api.services.users_service import UsersService
from social_api.services.videos_service import VideosService
from social_api.services.relations_service import RelationsService
from social_api.services.favorites_service import FavoritesService


def user_id_header(x_user_id: str = Header(..., alias="X-User-Id")) -> int:
    # id пользователя — положительное целое (user_id в монге)
    try:
        user_id = int(x_user_id)
    except ValueError:
        user_id = 0
    if user_id <= 0:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Invalid X-User-Id")
    return user_id


async def get_db() -> AsyncIOMotorDatabase:
    return await get_mongo_db()


async def get_users_service(db=Depends(get_db)) -> UsersService:
    return UsersService(db)


async def get_videos_service(db=Depends(get_db)) -> VideosService:
    return VideosService(db)


async def get_relations_service(db=Depends(get_db)) -> RelationsService:
    return RelationsService(db)


async def get_favorites_service(
        db=Depends(get_db),
        users: UsersService = Depends(get_users_service),
) -> FavoritesService:
    return FavoritesService(db, users)
