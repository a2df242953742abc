"""Configuration models for the flequit-recur command line."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

OutputFormat = Literal["pretty", "table", "json", "yaml"]


class OutputConfig(BaseModel):
    """Output configuration."""

    format: OutputFormat = Field(default="pretty")
    color: bool = Field(default=True)
    date_format: str = Field(default="%Y-%m-%d %H:%M (%a)")

    @field_validator("date_format")
    @classmethod
    def validate_date_format(cls, v: str) -> str:
        """Reject blank formats; strftime accepts anything else."""
        if not v or not v.strip():
            raise ValueError("date_format cannot be empty")
        return v


class PreviewConfig(BaseModel):
    """Preview configuration."""

    count: int = Field(default=10, ge=1, le=500)


class AppConfig(BaseModel):
    """Main flequit-recur configuration."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    preview: PreviewConfig = Field(default_factory=PreviewConfig)
