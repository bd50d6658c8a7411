"""Pure Pillow transform stages: decode, crop, scale and encode."""

from io import BytesIO

from loguru import logger
from PIL import Image

from ...common.errors import DecodeFailedError, EncodeFailedError
from ...utils.media_types import ImageType


def decode_image(
    data: bytes,
    image_type: ImageType,
    *,
    max_bytes: int,
    max_pixels: int | None = None,
) -> Image.Image:
    """
    Decode raw image bytes into a fully loaded Pillow image.

    Args:
        data: Encoded image bytes
        image_type: Format the bytes are encoded in
        max_bytes: Largest input accepted, in bytes
        max_pixels: Optional ceiling on width * height

    Returns:
        Decoded image; its size is authoritative over header metadata

    Raises:
        DecodeFailedError: If the input is too large or Pillow cannot read it
    """
    if len(data) > max_bytes:
        raise DecodeFailedError(
            f"image data is {len(data)} bytes, larger than the {max_bytes} byte limit"
        )

    try:
        img = Image.open(BytesIO(data), formats=[image_type.pil_format])
        try:
            if max_pixels is not None and img.width * img.height > max_pixels:
                raise DecodeFailedError(
                    f"image is {img.width}x{img.height} pixels, "
                    + f"more than the {max_pixels} pixel limit"
                )
            img.load()
        except Exception:
            img.close()
            raise
    except (Image.DecompressionBombError, OSError, SyntaxError, ValueError) as exc:
        raise DecodeFailedError(str(exc)) from exc

    logger.debug(f"Decoded {image_type} image {img.width}x{img.height} ({img.mode})")
    return img


def crop_square(img: Image.Image) -> Image.Image:
    """Crop the centered square whose side is the shortest image side."""
    width, height = img.size
    shortest = min(width, height)
    left = (width - shortest) // 2
    top = (height - shortest) // 2

    return img.crop((left, top, left + shortest, top + shortest))


def scale_to_longest(
    img: Image.Image,
    target_size: int,
    resample: Image.Resampling = Image.Resampling.BOX,
) -> Image.Image:
    """Scale so the longer side equals target_size, keeping the aspect ratio."""
    width, height = img.size

    if width > height:
        new_width = target_size
        new_height = max(1, round(height * target_size / width))
    else:
        new_height = target_size
        new_width = max(1, round(width * target_size / height))

    return img.resize((new_width, new_height), resample)


# Modes each encoder can write; formats not listed convert on their own
WRITABLE_MODES: dict[ImageType, tuple[str, ...]] = {
    ImageType.JPEG: ("L", "RGB", "CMYK"),
    ImageType.PNG: ("1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"),
    ImageType.GIF: ("1", "L", "P", "RGB", "RGBA"),
    ImageType.BMP: ("1", "L", "P", "RGB", "RGBA"),
}

GREYSCALE_MODES = ("1", "L", "LA", "I", "I;16", "I;16B", "I;16L", "I;16N", "F")

# Encoders that take a lossy quality setting
QUALITY_TYPES = (ImageType.JPEG, ImageType.WEBP)


def to_writable_mode(img: Image.Image, output_type: ImageType) -> Image.Image:
    """Convert img to a pixel mode the output encoder can write.

    Alpha is kept as RGBA where the format allows it, greyscale and
    high-depth single channel images become L, everything else RGB.
    """
    writable = WRITABLE_MODES.get(output_type)
    if writable is None or img.mode in writable:
        return img

    if "A" in img.getbands() and "RGBA" in writable:
        mode = "RGBA"
    elif img.mode in GREYSCALE_MODES:
        mode = "L"
    else:
        mode = "RGB"

    logger.debug(f"Converting {img.mode} image to {mode} for {output_type}")
    return img.convert(mode)


def encode_image(
    img: Image.Image,
    output_type: ImageType,
    *,
    jpeg_quality: int = 100,
) -> bytes:
    """
    Serialize an image to bytes.

    jpeg_quality applies to the lossy JPEG and WebP encoders and is
    ignored for other formats.

    Raises:
        EncodeFailedError: If Pillow cannot write the requested format
    """
    save_kwargs: dict[str, object] = {}
    if output_type in QUALITY_TYPES:
        save_kwargs["quality"] = jpeg_quality

    buffer = BytesIO()
    try:
        img = to_writable_mode(img, output_type)
        img.save(buffer, format=output_type.pil_format, **save_kwargs)
    except (KeyError, OSError, ValueError) as exc:
        raise EncodeFailedError(str(exc) or type(exc).__name__) from exc

    return buffer.getvalue()
