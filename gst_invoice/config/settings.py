from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Read env from the process + optionally from a local .env file
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    # App
    ENVIRONMENT: str = Field(default="dev", validation_alias=AliasChoices("ENVIRONMENT", "environment"))
    APP_NAME: str = Field(default="gst_invoice", validation_alias=AliasChoices("APP_NAME", "app_name"))
    LOG_LEVEL: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))
    DEBUG: bool = Field(default=False, validation_alias=AliasChoices("DEBUG", "debug"))

    # Invoice numbering (used when no business profile has been saved yet)
    DEFAULT_INVOICE_PREFIX: str = Field(
        default="INV",
        validation_alias=AliasChoices("DEFAULT_INVOICE_PREFIX", "default_invoice_prefix"),
    )
    INVOICE_NUMBER_WIDTH: int = Field(
        default=4,
        ge=1,
        validation_alias=AliasChoices("INVOICE_NUMBER_WIDTH", "invoice_number_width"),
    )

    # Presentation
    CURRENCY_SYMBOL: str = Field(default="₹", validation_alias=AliasChoices("CURRENCY_SYMBOL", "currency_symbol"))


settings = Settings()
