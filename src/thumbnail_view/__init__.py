"""thumbnail_view - Pillow thumbnail view for FastAPI / Starlette apps."""

from .common.errors import (
    DecodeFailedError,
    EncodeFailedError,
    ErrorKind,
    MissingInputError,
    ThumbnailError,
    UnsupportedFormatError,
)
from .config import ThumbnailSettings
from .pipeline import (
    Failed,
    ImageInput,
    PipelineResult,
    ThumbnailOptions,
    ThumbnailPipeline,
    Transformed,
    Unchanged,
    generate_thumbnail,
)
from .routes import create_router
from .utils.media_types import ImageType, supported_types
from .view import ThumbnailView

__version__ = "0.1.0"

__all__ = [
    "ThumbnailPipeline",
    "ThumbnailView",
    "ThumbnailSettings",
    "ThumbnailOptions",
    "ImageInput",
    "ImageType",
    "PipelineResult",
    "Unchanged",
    "Transformed",
    "Failed",
    "ErrorKind",
    "ThumbnailError",
    "MissingInputError",
    "UnsupportedFormatError",
    "DecodeFailedError",
    "EncodeFailedError",
    "create_router",
    "generate_thumbnail",
    "supported_types",
    "__version__",
]
