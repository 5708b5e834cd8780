# yang_swagger/config.py
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENUM_MODELS: bool = True
    LOG_LEVEL: str = "INFO"
    DEFINITIONS_PREFIX: str = "#/definitions/"

    class Config:
        env_prefix = "YANG2SWAGGER_"
        env_file = ".env"
        extra = "ignore"

settings = Settings()
