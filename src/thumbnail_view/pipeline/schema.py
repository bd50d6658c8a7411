"""Pydantic schemas for thumbnail options, inputs and results."""

from typing import ClassVar, Literal

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..common.errors import ErrorKind
from ..utils.media_types import ImageType, detect_mime, read_dimensions
from ..utils.resampling import resolve_resample

# ─────────────────────────────────────────────────────────────
# Input
# ─────────────────────────────────────────────────────────────


class ImageInput(BaseModel):
    """Raw image bytes plus metadata derived from the header alone."""

    data: bytes = Field(..., description="Raw encoded image bytes")
    mime_type: str | None = Field(default=None, description="Detected MIME type")
    image_type: ImageType | None = Field(
        default=None, description="Detected type, None if unsupported or unknown"
    )
    width: int | None = Field(default=None, gt=0)
    height: int | None = Field(default=None, gt=0)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @classmethod
    def from_bytes(cls, data: bytes) -> "ImageInput":
        mime_type = detect_mime(data)
        width, height = read_dimensions(data)
        return cls(
            data=data,
            mime_type=mime_type,
            image_type=ImageType.from_mime(mime_type),
            width=width,
            height=height,
        )

    @property
    def longest_side(self) -> int | None:
        if self.width is None or self.height is None:
            return None
        return max(self.width, self.height)


# ─────────────────────────────────────────────────────────────
# Options
# ─────────────────────────────────────────────────────────────


class ThumbnailOptions(BaseModel):
    """Per-invocation thumbnail options.

    Unset values fall back to ThumbnailSettings.

    Attributes:
        target_size: Desired length of the longest side, in pixels
        square: Crop to a centered square before scaling
        output_type: Output encoding (e.g. "png"), defaults to the input type
        force: Decode and re-encode even if nothing else requires it
        jpeg_quality: Encoder quality for JPEG and WebP output (0-100)
        max_decode_bytes: Largest input that will be decoded, in bytes
        scaling_qtype: Resampling filter name used when scaling
    """

    target_size: int | None = Field(default=None, gt=0)
    square: bool = False
    output_type: str | None = None
    force: bool = False
    jpeg_quality: int | None = Field(default=None, ge=0, le=100)
    max_decode_bytes: int | None = Field(default=None, gt=0)
    scaling_qtype: str | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @field_validator("scaling_qtype")
    @classmethod
    def validate_scaling_qtype(cls, v: str | None) -> str | None:
        if v is not None:
            _ = resolve_resample(v)
        return v


# ─────────────────────────────────────────────────────────────
# Results
# ─────────────────────────────────────────────────────────────


class Unchanged(BaseModel):
    """No transform was needed; the original bytes are returned verbatim."""

    status: Literal["unchanged"] = "unchanged"
    data: bytes
    mime_type: str

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class Transformed(BaseModel):
    """Encoded thumbnail bytes plus the final decoded image."""

    status: Literal["transformed"] = "transformed"
    data: bytes
    mime_type: str
    image_type: ImageType
    image: Image.Image

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, arbitrary_types_allowed=True
    )


class Failed(BaseModel):
    status: Literal["failed"] = "failed"
    error_kind: ErrorKind
    message: str

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


PipelineResult = Unchanged | Transformed | Failed
