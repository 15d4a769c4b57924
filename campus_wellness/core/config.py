from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "postgresql://wellness:wellness@db:5432/wellness"
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # How far back burnout scoring reads check-ins and academic snapshots.
    CHECKIN_HISTORY_DAYS: int = 30

    # Comma-separated allowed origins, or "*" to allow all.
    # Example: "https://wellness.campus.edu,https://mentor.campus.edu"
    CORS_ORIGINS: str = "*"

    @property
    def cors_origins_list(self) -> list[str]:
        if self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
