from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # Lookback window for the user outage report health status.
    OUTAGE_REPORT_ALERT_TTL_HOURS: int = 48

    # Creates the feedbacks table and its enum type when the app starts.
    MIGRATE_ON_STARTUP: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
