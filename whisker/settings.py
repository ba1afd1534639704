from pydantic_settings import BaseSettings, SettingsConfigDict

from .measurement.catalog import UnitSystem


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Whisker Measure API"
    log_level: str = "INFO"

    # Scaling
    default_unit_system: UnitSystem = UnitSystem.METRIC
    scale_presets: list[float] = [1.0, 2.0, 3.0]
    max_scaling_sessions: int = 1000

    # Rate limiting (per-IP)
    rate_limit: str = "100/minute"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost",
        "http://127.0.0.1",
    ]


settings = Settings()
