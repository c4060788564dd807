from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    project_name: str = "Restaurant Geo API"
    api_prefix: str = "/api"
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    mongodb_uri: str = Field(default="mongodb://localhost:27017")
    mongodb_db: str = Field(default="restaurantdb")
    restaurants_collection: str = Field(default="restaurants")
    users_collection: str = Field(default="users")

    jwt_secret_key: str = Field(default="change-me")
    jwt_algorithm: str = Field(default="HS256")
    # 30일
    access_token_expire_minutes: int = Field(default=60 * 24 * 30)

    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[arg-type]


settings = get_settings()
