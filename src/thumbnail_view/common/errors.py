"""Error types raised by the thumbnail pipeline stages."""

from collections.abc import Iterable
from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    MISSING_INPUT = "missing_input"
    UNSUPPORTED_FORMAT = "unsupported_format"
    DECODE_FAILED = "decode_failed"
    ENCODE_FAILED = "encode_failed"


class ThumbnailError(Exception):
    """Base class for thumbnail pipeline errors.

    Every error is terminal for the invocation that raised it.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str):
        self.message: str = message
        super().__init__(message)


class MissingInputError(ThumbnailError):
    kind: ClassVar[ErrorKind] = ErrorKind.MISSING_INPUT

    def __init__(
        self,
        message: str = "Image data missing, set 'image' to the raw image bytes",
    ):
        super().__init__(message)


class UnsupportedFormatError(ThumbnailError):
    kind: ClassVar[ErrorKind] = ErrorKind.UNSUPPORTED_FORMAT

    def __init__(self, detail: str, supported: Iterable[str]):
        self.supported: list[str] = list(supported)
        super().__init__(
            f"{detail}; set the image type to one of the following values: "
            + ", ".join(self.supported)
        )


class DecodeFailedError(ThumbnailError):
    kind: ClassVar[ErrorKind] = ErrorKind.DECODE_FAILED

    def __init__(self, reason: str):
        super().__init__(f"Failed to read image: {reason}")


class EncodeFailedError(ThumbnailError):
    kind: ClassVar[ErrorKind] = ErrorKind.ENCODE_FAILED

    def __init__(self, reason: str):
        super().__init__(f"Failed to write image: {reason}")
