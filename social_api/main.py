import logging

from fastapi import FastAPI

from contextlib import asynccontextmanager
from social_api.db.mongo import get_client, close_client

from social_api.core.logger import setup_json_logging, shutdown_logging
from social_api.core.sentry import init_sentry
from social_api.core.config import settings
from social_api.core.middleware import RequestContextMiddleware

from social_api.api.v1.relations import router as relations_router
from social_api.api.v1.favorites import router as favorites_router
from social_api.api.v1.users import router as users_router
from social_api.api.v1.videos import router as videos_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 1) логи до всего
    setup_json_logging(service=settings.app_name, level=settings.log_level)
    init_sentry(settings.sentry_dsn, environment=settings.env)

    # 2) прогреваем Motor-клиент (ping внутри, ошибка — только warning)
    await get_client()

    try:
        yield
    finally:
        await close_client()
        shutdown_logging()


app = FastAPI(title="Social Video Service", lifespan=lifespan)

# наш trace_id + access JSON
app.add_middleware(RequestContextMiddleware)

# приглушим штатный uvicorn-access, чтобы не было дублей
logging.getLogger("uvicorn.access").setLevel("WARNING")


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(relations_router)
app.include_router(favorites_router)
app.include_router(users_router)
app.include_router(videos_router)
