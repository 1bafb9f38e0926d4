from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    PROJECT_NAME: str = "OSM Shortlink"
    PROJECT_DESCRIPTION: str = "Compact OpenStreetMap short codes for coordinates and zoom levels"
    VERSION: str = "1.0.0"

    # Shortlink Settings
    SHORTLINK_BASE_URL: str = "https://osm.org/go/"
    DEFAULT_ZOOM: int = 15

    # Logging Settings
    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
