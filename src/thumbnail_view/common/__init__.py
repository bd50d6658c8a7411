"""Common module - error types shared by the pipeline and the view."""

from .errors import (
    DecodeFailedError,
    EncodeFailedError,
    ErrorKind,
    MissingInputError,
    ThumbnailError,
    UnsupportedFormatError,
)

__all__ = [
    "ErrorKind",
    "ThumbnailError",
    "MissingInputError",
    "UnsupportedFormatError",
    "DecodeFailedError",
    "EncodeFailedError",
]
