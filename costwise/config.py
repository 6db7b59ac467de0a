from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "postgresql+asyncpg://costwise:costwise_dev@db:5432/costwise"
    DATABASE_ECHO: bool = False

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Estimator defaults
    DEFAULT_ZIP_CODE: str = "20895"
    DEFAULT_PAGE_SIZE: int = 20

    # App
    APP_ENV: str = "development"
    APP_URL: str = "http://localhost:8000"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
