"""Thumbnail pipeline."""

from .schema import (
    Failed,
    ImageInput,
    PipelineResult,
    ThumbnailOptions,
    Transformed,
    Unchanged,
)
from .thumbnail_pipeline import ThumbnailPipeline, generate_thumbnail

__all__ = [
    "ThumbnailPipeline",
    "generate_thumbnail",
    "ThumbnailOptions",
    "ImageInput",
    "PipelineResult",
    "Unchanged",
    "Transformed",
    "Failed",
]
