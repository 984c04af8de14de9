"""Runtime configuration for the structlog sink."""

from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .levels import parse_level


class Settings(BaseSettings):
    """Settings loaded via environment variables or .env files."""

    name_field_name: str = Field(
        default="logger",
        description="Field holding the hierarchical logger name.",
    )
    name_separator: str = Field(default="/", description="Separator between logger name segments.")
    verbosity_field_name: str = Field(
        default="v",
        description="Field holding the verbosity of info records; empty disables it.",
    )
    level: Union[int, str] = Field(default="info", description="Minimum backend level written.")
    report_caller: bool = Field(default=False, description="Add the caller location to every record.")

    model_config = {
        "env_prefix": "STRUCTLOGR_",
        "frozen": True,
    }

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: Union[int, str]) -> int:
        return int(parse_level(value))


def load_settings() -> Settings:
    """Load configuration using pydantic-settings."""

    return Settings()  # type: ignore[arg-type]
