"""Thumbnail route factory."""

from typing import Annotated, Callable

from fastapi import APIRouter, File, Form, Query, Request, Response, UploadFile
from starlette.concurrency import run_in_threadpool

from .view import ThumbnailView

# Returns raw image bytes for an id, or None if there is no such image
ImageSource = Callable[[str], bytes | None]


def _stash_options(
    request: Request,
    *,
    size: int | None,
    square: bool,
    image_type: str | None,
    force: bool,
    quality: int | None,
) -> None:
    request.state.image_size = size
    request.state.square = square
    request.state.image_type = image_type
    request.state.force = force
    request.state.jpeg_quality = quality


def create_router(view: ThumbnailView, image_source: ImageSource) -> APIRouter:
    """Create router with injected dependencies.

    Args:
        view: ThumbnailView that renders the response
        image_source: Loads raw image bytes by id (blocking calls are fine,
                      they run in the threadpool)

    Example:
        app = FastAPI()
        app.include_router(
            create_router(ThumbnailView(), storage.read_image),
            prefix="/media",
        )
    """
    router = APIRouter()

    @router.get("/thumbnails/{image_id}", response_class=Response)
    async def get_thumbnail(
        image_id: str,
        request: Request,
        size: Annotated[
            int | None, Query(gt=0, description="Longest side in pixels")
        ] = None,
        square: Annotated[bool, Query(description="Crop to a centered square")] = False,
        image_type: Annotated[
            str | None, Query(alias="type", description="Output type (e.g. png)")
        ] = None,
        force: Annotated[bool, Query(description="Always re-encode")] = False,
        quality: Annotated[
            int | None, Query(ge=0, le=100, description="JPEG quality (0-100)")
        ] = None,
    ) -> Response:
        request.state.image = await run_in_threadpool(image_source, image_id)
        _stash_options(
            request,
            size=size,
            square=square,
            image_type=image_type,
            force=force,
            quality=quality,
        )
        return await run_in_threadpool(view.process, request)

    @router.post("/thumbnails", response_class=Response)
    async def create_thumbnail(
        request: Request,
        file: Annotated[UploadFile, File(description="Image file to thumbnail")],
        size: Annotated[
            int | None, Form(gt=0, description="Longest side in pixels")
        ] = None,
        square: Annotated[bool, Form(description="Crop to a centered square")] = False,
        image_type: Annotated[
            str | None, Form(alias="type", description="Output type (e.g. png)")
        ] = None,
        force: Annotated[bool, Form(description="Always re-encode")] = False,
        quality: Annotated[
            int | None, Form(ge=0, le=100, description="JPEG quality (0-100)")
        ] = None,
    ) -> Response:
        request.state.image = await file.read()
        _stash_options(
            request,
            size=size,
            square=square,
            image_type=image_type,
            force=force,
            quality=quality,
        )
        return await run_in_threadpool(view.process, request)

    _ = get_thumbnail, create_thumbnail
    return router
