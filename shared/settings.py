from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    APP_NAME: str = "Catalog Service"
    LOG_LEVEL: str = "INFO"

    # Listener address; the service has always been served on localhost:8080
    CATALOG_HOST: str = "localhost"
    CATALOG_PORT: int = 8080

    model_config = SettingsConfigDict(env_file=".env", extra='ignore', env_file_encoding='utf-8')

settings = Settings()
