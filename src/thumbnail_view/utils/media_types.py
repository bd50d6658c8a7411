from enum import StrEnum
from io import BytesIO

import magic
from PIL import Image, UnidentifiedImageError

from ..common.errors import UnsupportedFormatError


class ImageType(StrEnum):
    JPEG = "jpeg"
    PNG = "png"
    GIF = "gif"
    BMP = "bmp"
    TIFF = "tiff"
    WEBP = "webp"

    @property
    def mime_type(self) -> str:
        return "image/" + self.value

    @property
    def pil_format(self) -> str:
        return self.value.upper()

    @classmethod
    def from_mime(cls, value: str | None) -> "ImageType | None":
        """Map a type name or MIME type to an ImageType, None if unknown."""
        if not value:
            return None
        name = value.strip().lower()
        if name.startswith("image/"):
            name = name[len("image/") :]
        name = _ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            return None

    @classmethod
    def parse(cls, value: str) -> "ImageType":
        image_type = cls.from_mime(value)
        if image_type is None:
            raise UnsupportedFormatError(
                f"Unsupported image type '{value}'", supported_types()
            )
        return image_type


_ALIASES: dict[str, str] = {
    "jpg": "jpeg",
    "pjpeg": "jpeg",
    "tif": "tiff",
    "x-ms-bmp": "bmp",
    "x-bmp": "bmp",
}


def supported_types() -> list[str]:
    """Image types that can be both read and written."""
    return [image_type.value for image_type in ImageType]


def detect_mime(data: bytes) -> str | None:
    # Create a Magic object
    mime = magic.Magic(mime=True)

    file_type = mime.from_buffer(data)
    if not file_type or file_type == "application/octet-stream":
        return None
    return file_type


def read_dimensions(data: bytes) -> tuple[int | None, int | None]:
    """Width and height from the image header, without decoding pixels."""
    try:
        with Image.open(BytesIO(data)) as img:
            width, height = img.size
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ):
        return None, None
    if width <= 0 or height <= 0:
        return None, None
    return width, height
