from functools import lru_cache

from pydantic_settings import BaseSettings


class OrderCoreSettings(BaseSettings):
    """
    Settings for order-core.
    Loaded from the environment (and .env if present) with prefix ORDER_CORE_*
    """

    log_level: str = "INFO"
    log_format: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "ORDER_CORE_",
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> OrderCoreSettings:
    """Return cached settings for the whole package."""
    return OrderCoreSettings()
