"""Pydantic models for generation requests."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenerationOptions(BaseModel):
    """Flags selecting which test categories are generated."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    include_security: bool = Field(default=True, alias="includeSecurity")
    include_boundary: bool = Field(default=True, alias="includeBoundary")
    include_negative: bool = Field(default=True, alias="includeNegative")


class GenerationRequest(BaseModel):
    """Input to a single pipeline run."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    description: str
    options: GenerationOptions = Field(default_factory=GenerationOptions)

    @field_validator("description")
    @classmethod
    def require_text(cls, value: str) -> str:
        """Reject blank descriptions."""
        if not value.strip():
            raise ValueError("description must not be empty")
        return value

    @field_validator("options", mode="before")
    @classmethod
    def default_options(cls, value):
        """Treat a null options block as all defaults."""
        if value is None:
            return {}
        return value
