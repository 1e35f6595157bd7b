"""Application configuration via pydantic settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.ledger_models import TaxRates, coerce_number


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "jewel-ledger"
    app_version: str = "1.0.0"
    app_env: str = "development"

    currency: str = "INR"

    # Shop-level GST rates used when a request carries none.
    default_cgst_rate: float = 0.0
    default_sgst_rate: float = 0.0

    api_key: Optional[str] = None
    log_level: str = "INFO"
    log_json: bool = True

    @field_validator("default_cgst_rate", "default_sgst_rate", mode="before")
    @classmethod
    def _coerce_rates(cls, value):
        return coerce_number(value)

    @property
    def default_tax_rates(self) -> TaxRates:
        return TaxRates(cgst_rate=self.default_cgst_rate, sgst_rate=self.default_sgst_rate)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
