from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Database
    database_url: str

    # JWT (bearer auth)
    JWT_SECRET: str
    JWT_ISS: str = "academy-api"
    JWT_AUD: str = "academy-admin"
    ACCESS_TOKEN_TTL_SECONDS: int = 60 * 60  # 1 hour

    CORS_ORIGINS: str = "http://localhost:8080"

    LOG_LEVEL: str = "INFO"

    def cors_origins(self) -> list[str]:
        raw = (self.CORS_ORIGINS or "").strip()
        if not raw:
            return []
        return [x.strip() for x in raw.split(",") if x.strip()]


settings = Settings()
