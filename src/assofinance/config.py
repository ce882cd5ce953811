from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent.parent / ".env"),
        case_sensitive=False,
    )

    # Application
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Database
    database_url: str
    db_echo: bool = False

    # Money / amounts
    currency: str = "EUR"
    currency_minor_unit: int = 2

    # Listing / reporting defaults
    transactions_page_limit: int = 100
    report_default_days: int = 30


settings = Settings()
