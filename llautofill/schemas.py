"""Pydantic schemas for configuration validation."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, SHADE_OPACITY


class AutofillConfig(BaseModel):
    """Autofill settings (network access and result-cell shading)."""

    model_config = ConfigDict(extra='forbid')

    base_url: str = Field(default=DEFAULT_BASE_URL, min_length=1)
    request_timeout: float = Field(default=30.0, gt=0, le=300)
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)
    cookies: dict[str, str] = Field(default_factory=dict)
    shade_opacity: float = Field(default=SHADE_OPACITY, ge=0, le=1)

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v):
        """Ensure the base URL is absolute http(s)."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError(f'base_url must start with http:// or https://, got {v}')
        return v.rstrip('/')
