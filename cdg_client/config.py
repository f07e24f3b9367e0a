from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .encoder import BASE_URL


class Settings(BaseSettings):
    # Core Settings
    api_key: str | None = Field(None, description="Congress.gov API key (CDG_API_KEY)")
    base_url: str = Field(BASE_URL, description="API base URL")
    timeout: float = Field(30.0, description="HTTP timeout in seconds")

    # Logging Settings
    log_level: str = Field("WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(False, description="Emit JSON log lines")

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CDG_", extra="ignore")


def get_settings() -> Settings:
    """Read settings fresh from the environment and .env file."""
    return Settings()


settings = Settings()
