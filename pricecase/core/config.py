# pricecase/core/config.py
# -----------------------------------------------------------------------------
# Global settings (pydantic-settings v2)
# - read from the .env file and OS environment into a Settings object
# - engine defaults (conversion rates, upsell uplift, payback threshold) live
#   here so every caller shares one value
# -----------------------------------------------------------------------------
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # basics
    APP_NAME: str = "Pricecase"
    ENV: str = "dev"
    DATABASE_URL: str = "sqlite+aiosqlite:///./pricecase.db"

    # server
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # logging
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    # locale table
    DEFAULT_LOCALE: str = "it"
    FALLBACK_LOCALE: str = "it"

    # projection defaults (percentages)
    RETAINED_SALES_RATE: float = 35.0
    UPSELLING_RATE: float = 3.78
    UPSELL_CART_UPLIFT: float = 20.0
    PAYBACK_DISPLAY_MONTHS: float = 6.0

    # pricing presets / scenarios
    PRESET_MIN_FLAT_FEE: float = 69.0
    MAX_SCENARIO_COPIES: int = 3

    # share links
    SHARE_LINK_TTL_DAYS: int = 30

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore"  # ignore unknown keys in .env
    )


settings = Settings()
