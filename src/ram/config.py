from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RAM_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    user_timezone: str = "UTC"
    language: str = "en-US"

    # Scheduling
    default_activity: str = "Meeting"
    recurrence_weeks: int = 4  # weeks of occurrences written for a recurring event

    # Study timer
    focus_minutes: int = 25
    break_minutes: int = 5

    # Sentry error tracking
    sentry_dsn: str = ""
    sentry_environment: str = "production"

    log_level: str = "INFO"

    @property
    def has_sentry(self) -> bool:
        return bool(self.sentry_dsn)


settings = Settings()
