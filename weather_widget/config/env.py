from pydantic_settings import BaseSettings, SettingsConfigDict


class WidgetEnv(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WEATHER_WIDGET_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "WARNING"
    config_path: str | None = None
