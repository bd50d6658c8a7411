"""Pure thumbnail algorithms."""

from .image_transforms import (
    crop_square,
    decode_image,
    encode_image,
    scale_to_longest,
    to_writable_mode,
)

__all__ = [
    "decode_image",
    "crop_square",
    "scale_to_longest",
    "to_writable_mode",
    "encode_image",
]
