from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="AUDITKIT_")

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

settings = Settings()
