# social_api/core/config.py
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "social_video_service"
    env: str = Field(default="local")
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    mongo_dsn: str = Field(
        default="mongodb://mongo:27017/tiktok?replicaSet=rs0",
        alias="MONGO_DSN"
    )
    mongo_db: str = "tiktok"
    # коллекции создаются внешним сервисом, мы их только читаем/мутируем
    users_collection: str = "user"
    videos_collection: str = "video"

    sentry_dsn: str = Field(default="", alias="SENTRY_DSN")
    # Pydantic v2: модель конфигурации
    model_config = SettingsConfigDict(env_file="infra/.env", extra="ignore")


settings = Settings()
