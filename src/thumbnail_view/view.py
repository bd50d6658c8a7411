"""ThumbnailView - renders request-scoped image bytes as a thumbnail response."""

from typing import Any

from fastapi import HTTPException, Request, Response
from loguru import logger
from pydantic import ValidationError

from .common.errors import ErrorKind
from .config import ThumbnailSettings
from .pipeline.schema import Failed, ThumbnailOptions, Transformed
from .pipeline.thumbnail_pipeline import ThumbnailPipeline

# request.state attribute -> ThumbnailOptions field
STATE_OPTION_KEYS: dict[str, str] = {
    "image_size": "target_size",
    "image_type": "output_type",
    "square": "square",
    "force": "force",
    "jpeg_quality": "jpeg_quality",
    "max_image_size": "max_decode_bytes",
    "scaling_qtype": "scaling_qtype",
}

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.MISSING_INPUT: 404,
    ErrorKind.UNSUPPORTED_FORMAT: 415,
    ErrorKind.DECODE_FAILED: 422,
    ErrorKind.ENCODE_FAILED: 500,
}


class ThumbnailView:
    """
    View that turns `request.state.image` into a thumbnail response.

    Required state:
        image: raw image bytes

    Optional state:
        image_size, image_type, square, force, jpeg_quality,
        max_image_size, scaling_qtype

    Published state after a successful render:
        image_data: the response body bytes (useful for caching)
        thumbnail_image: the decoded Pillow image, only when transformed

    Example:
        view = ThumbnailView(ThumbnailSettings())

        @app.get("/avatar/{user_id}")
        def avatar(user_id: str, request: Request) -> Response:
            request.state.image = load_avatar(user_id)
            request.state.image_size = 150
            return view.process(request)
    """

    def __init__(self, settings: ThumbnailSettings | None = None):
        self.settings: ThumbnailSettings = settings or ThumbnailSettings()
        self.pipeline: ThumbnailPipeline = ThumbnailPipeline(self.settings)

    @staticmethod
    def options_from_state(state: Any) -> ThumbnailOptions:
        """Collect thumbnail options from request-scoped state.

        Raises:
            HTTPException: 400 if a value is invalid
        """
        values: dict[str, object] = {}
        for state_key, option in STATE_OPTION_KEYS.items():
            value = getattr(state, state_key, None)
            if value is not None:
                values[option] = value

        try:
            return ThumbnailOptions.model_validate(values)
        except ValidationError as exc:
            logger.error(f"Invalid thumbnail options: {exc}")
            raise HTTPException(
                status_code=400,
                detail=f"Invalid thumbnail options: {exc.errors(include_url=False)}",
            ) from exc

    def process(self, request: Request) -> Response:
        data = getattr(request.state, "image", None)
        if isinstance(data, (bytearray, memoryview)):
            data = bytes(data)

        options = self.options_from_state(request.state)
        result = self.pipeline.run(data, options)

        if isinstance(result, Failed):
            logger.error(f"Couldn't render image: {result.message}")
            raise HTTPException(
                status_code=ERROR_STATUS[result.error_kind],
                detail=result.message,
            )

        request.state.image_data = result.data
        if isinstance(result, Transformed):
            request.state.thumbnail_image = result.image

        return Response(content=result.data, media_type=result.mime_type)
