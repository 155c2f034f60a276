import logging
from functools import wraps
from http import HTTPStatus
from fastapi import HTTPException

from social_api.core.exceptions import (
    DataAccessError,
    DuplicateRelationError,
    InfrastructureError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

# каждому виду ошибки DAL — свой HTTP-код
ERRMAP: dict[type[DataAccessError], HTTPStatus] = {
    DuplicateRelationError: HTTPStatus.CONFLICT,
    NotFoundError: HTTPStatus.NOT_FOUND,
    InfrastructureError: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def status_for(error: DataAccessError,
               mapping: dict[type[DataAccessError], HTTPStatus]) -> HTTPStatus:
    """Самый специфичный статус по MRO исключения."""
    for cls in type(error).__mro__:
        if cls in mapping:
            return mapping[cls]
    return HTTPStatus.INTERNAL_SERVER_ERROR


def handle_data_errors(
        mapping: dict[type[DataAccessError], HTTPStatus] = ERRMAP):
    """
    Переводит ошибки DAL в HTTPException.
    detail = error.code ("follow_again", "video_not_found", ...),
    для 5xx наружу отдаём только "internal_error".
    """
    def decorator(fn):
        @wraps(fn)
        async def wrapper(*args, **kwargs):
            try:
                return await fn(*args, **kwargs)
            except DataAccessError as e:
                status = status_for(e, mapping)
                if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
                    raise HTTPException(status_code=status,
                                        detail="internal_error") from e
                raise HTTPException(status_code=status, detail=e.code) from e
            except RuntimeError as e:
                # нераспознанное — 500
                logger.exception("unhandled_runtime_error")
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail="internal_error") from e
        return wrapper
    return decorator
