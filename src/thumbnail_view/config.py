"""Process-wide thumbnail settings."""

from collections.abc import Mapping
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.resampling import DEFAULT_SCALING_QTYPE, resolve_resample

CONFIG_SECTION = "thumbnail_view"


class ThumbnailSettings(BaseSettings):
    """Defaults for every pipeline run, overridable per invocation.

    Values come from keyword arguments, THUMBNAIL_* environment variables
    or an application config section (see from_app_config).
    """

    model_config = SettingsConfigDict(
        env_prefix="THUMBNAIL_",
        extra="ignore",
        frozen=True,
    )

    # Largest image (in bytes) that will be decoded, defaults to 15 MB
    max_image_size: int = Field(default=15_728_640, gt=0)
    scaling_qtype: str = DEFAULT_SCALING_QTYPE
    jpeg_quality: int = Field(default=100, ge=0, le=100)
    # Optional ceiling on decoded width * height
    max_image_pixels: int | None = Field(default=None, gt=0)

    @field_validator("scaling_qtype")
    @classmethod
    def validate_scaling_qtype(cls, v: str) -> str:
        _ = resolve_resample(v)
        return v

    @classmethod
    def from_app_config(
        cls,
        app_config: Mapping[str, Any],
        section: str = CONFIG_SECTION,
    ) -> "ThumbnailSettings":
        """Build settings from the component's section of an app config.

        Example:
            config = {"thumbnail_view": {"max_image_size": 10_485_760}}
            settings = ThumbnailSettings.from_app_config(config)
        """
        values = app_config.get(section) or {}
        return cls(**dict(values))
