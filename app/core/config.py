from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Default is an in-memory SQLite database; data is lost on restart.
    # Point DATABASE_URL at a file (e.g. sqlite:///./toddlespot.db) to keep it.
    database_url: str = "sqlite://"
    project_name: str = "ToddleSpot API"
    api_prefix: str = "/api"

    # No real auth: every "current user" request resolves to this user id
    mock_user_id: int = 1

    # Seed demo venues, offers and the mock user into an empty database on startup
    seed_on_startup: bool = True

    default_page_size: int = 20
    max_page_size: int = 100

    # Radius used by /venues/nearby when none is given (km)
    nearby_default_radius_km: float = 5.0

    log_level: str = "INFO"

    # Debug flag (SQL echo)
    debug: bool = Field(default=False, alias="DEBUG")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="forbid"
    )


settings = Settings()
