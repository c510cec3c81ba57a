from pathlib import Path

from pydantic_settings import BaseSettings

BUNDLED_FALLBACK_FILE = Path(__file__).parent / "data" / "hotel-data-fallback.json"


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    anthropic_api_key: str
    hotel_api_url: str = "https://api.example.com/hotel-data"
    api_token: str = ""
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    cache_file: Path = Path("data/hotel-data-cache.json")
    fallback_file: Path = BUNDLED_FALLBACK_FILE
    cache_ttl_hours: float = 24.0
    inventory_timeout_seconds: float = 10.0
    refresh_interval_hours: float = 0.0

    model_name: str = "claude-sonnet-4-20250514"
    model_max_tokens: int = 1024
    model_timeout_seconds: float = 60.0

    default_available_rooms: int = 5
