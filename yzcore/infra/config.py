"""Application configuration via Pydantic Settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Dice
    default_game: str = "myz"
    default_max_push: int = 1
    max_dice_per_type: int = 100

    # Pushable-roll cache
    roll_cache_ttl: int = 3600  # seconds
    roll_cache_max_size: int = 1000

    # App
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    app_debug: bool = False
    log_level: str = "INFO"

    model_config = {"env_prefix": "YZ_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
