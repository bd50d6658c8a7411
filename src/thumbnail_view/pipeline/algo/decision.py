"""Decide whether an image needs to be decoded and transformed."""

from loguru import logger

from ...utils.media_types import ImageType
from ..schema import ImageInput, ThumbnailOptions


def should_transform(
    image_input: ImageInput,
    options: ThumbnailOptions,
    output_type: ImageType | None = None,
) -> bool:
    """
    Check header metadata against the options, without decoding pixels.

    Any one of these triggers a transform:
    - target_size is smaller than the longest side
    - square is requested and the image is not square
    - an explicit output type differs from the input type
    - force is set

    Unknown dimensions skip the size and square checks.
    """
    reasons: list[str] = []
    longest = image_input.longest_side

    if options.target_size is not None and longest is not None:
        if options.target_size < longest:
            reasons.append(f"longest side {longest} > {options.target_size}")

    if options.square and longest is not None:
        if image_input.width != image_input.height:
            reasons.append(f"not square ({image_input.width}x{image_input.height})")

    if options.output_type is not None and output_type != image_input.image_type:
        reasons.append(f"transcode {image_input.image_type} -> {output_type}")

    if options.force:
        reasons.append("forced")

    if reasons:
        logger.debug("Transform required: " + "; ".join(reasons))
    return bool(reasons)
