from decimal import Decimal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = Field(alias="DATABASE_URL")

    # Frontend origin allowed by CORS
    frontend_url: str | None = Field(default=None, alias="FRONTEND_URL")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Business parameters for examples
    allowed_countries: str = Field(default="USA,CA", alias="ALLOWED_COUNTRIES")
    salary_min: Decimal | None = Field(default=None, alias="SALARY_MIN")
    salary_max: Decimal | None = Field(default=None, alias="SALARY_MAX")

    @field_validator("frontend_url", "salary_min", "salary_max", mode="before")
    @classmethod
    def empty_str_to_none(cls, v):
        """Convert empty strings to None for optional fields."""
        if v == "":
            return None
        return v

    @property
    def allowed_country_set(self) -> set[str]:
        """Comma separated ALLOWED_COUNTRIES as a set, blanks dropped."""
        return {c.strip() for c in self.allowed_countries.split(",") if c.strip()}

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
