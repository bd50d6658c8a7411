"""ThumbnailPipeline - decide, then decode, crop, scale and encode."""

from loguru import logger

from ..common.errors import MissingInputError, ThumbnailError, UnsupportedFormatError
from ..config import ThumbnailSettings
from ..utils.media_types import ImageType, supported_types
from ..utils.profiling import timed
from ..utils.resampling import resolve_resample
from .algo.decision import should_transform
from .algo.image_transforms import (
    crop_square,
    decode_image,
    encode_image,
    scale_to_longest,
)
from .schema import (
    Failed,
    ImageInput,
    PipelineResult,
    ThumbnailOptions,
    Transformed,
    Unchanged,
)


class ThumbnailPipeline:
    """
    Stateless thumbnail pipeline.

    - Settings are read-only and shared between invocations
    - Each run() is independent and synchronous
    - Errors never escape run(); they come back as Failed

    Example:
        pipeline = ThumbnailPipeline(ThumbnailSettings(scaling_qtype="lanczos"))
        result = pipeline.run(raw_bytes, ThumbnailOptions(target_size=150))
        if isinstance(result, Transformed):
            result.image.show()
    """

    def __init__(self, settings: ThumbnailSettings | None = None):
        self.settings: ThumbnailSettings = settings or ThumbnailSettings()

    @timed
    def run(
        self,
        data: bytes | None,
        options: ThumbnailOptions | None = None,
    ) -> PipelineResult:
        try:
            return self._run(data, options or ThumbnailOptions())
        except ThumbnailError as exc:
            logger.warning(f"Thumbnail pipeline failed ({exc.kind}): {exc.message}")
            return Failed(error_kind=exc.kind, message=exc.message)

    def _run(self, data: bytes | None, options: ThumbnailOptions) -> PipelineResult:
        if data is None:
            raise MissingInputError()

        image_input = ImageInput.from_bytes(data)
        input_type = image_input.image_type
        if input_type is None or image_input.mime_type is None:
            raise UnsupportedFormatError(
                "Unable to derive image type from image data "
                + f"(detected {image_input.mime_type or 'nothing'})",
                supported_types(),
            )

        output_type = (
            ImageType.parse(options.output_type) if options.output_type else input_type
        )

        if not should_transform(image_input, options, output_type):
            logger.debug(f"Returning {input_type} image unchanged")
            return Unchanged(data=data, mime_type=image_input.mime_type)

        img = decode_image(
            data,
            input_type,
            max_bytes=options.max_decode_bytes or self.settings.max_image_size,
            max_pixels=self.settings.max_image_pixels,
        )

        # Decoded dimensions supersede the header metadata from here on
        if options.square and img.width != img.height:
            img = crop_square(img)
            logger.debug(f"Cropped to {img.width}x{img.height}")

        if options.target_size is not None and options.target_size < max(img.size):
            resample = resolve_resample(
                options.scaling_qtype or self.settings.scaling_qtype
            )
            img = scale_to_longest(img, options.target_size, resample)
            logger.debug(f"Scaled to {img.width}x{img.height} ({resample.name})")

        jpeg_quality = (
            options.jpeg_quality
            if options.jpeg_quality is not None
            else self.settings.jpeg_quality
        )
        encoded = encode_image(img, output_type, jpeg_quality=jpeg_quality)

        return Transformed(
            data=encoded,
            mime_type=output_type.mime_type,
            image_type=output_type,
            image=img,
        )


def generate_thumbnail(
    data: bytes | None,
    options: ThumbnailOptions | None = None,
    settings: ThumbnailSettings | None = None,
) -> PipelineResult:
    """Run the thumbnail pipeline once.

    Framework-agnostic entry point for callers without a view.
    """
    return ThumbnailPipeline(settings).run(data, options)
