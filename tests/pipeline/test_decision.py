"""Unit tests for the transform decision stage."""

from thumbnail_view.pipeline.algo.decision import should_transform
from thumbnail_view.pipeline.schema import ImageInput, ThumbnailOptions
from thumbnail_view.utils.media_types import ImageType


def make_input(
    width: int | None = 400,
    height: int | None = 200,
    image_type: ImageType = ImageType.PNG,
) -> ImageInput:
    return ImageInput(
        data=b"raw",
        mime_type=image_type.mime_type,
        image_type=image_type,
        width=width,
        height=height,
    )


def test_no_options_needs_no_transform():
    assert not should_transform(make_input(), ThumbnailOptions(), ImageType.PNG)


# ============================================================================
# target_size
# ============================================================================


def test_target_size_smaller_than_longest_side():
    options = ThumbnailOptions(target_size=399)

    assert should_transform(make_input(), options, ImageType.PNG)


def test_target_size_equal_or_larger_than_longest_side():
    assert not should_transform(
        make_input(), ThumbnailOptions(target_size=400), ImageType.PNG
    )
    assert not should_transform(
        make_input(), ThumbnailOptions(target_size=1000), ImageType.PNG
    )


def test_target_size_uses_longest_side_for_portrait():
    image_input = make_input(width=200, height=400)

    assert should_transform(image_input, ThumbnailOptions(target_size=300), ImageType.PNG)


def test_target_size_ignored_when_dimensions_unknown():
    image_input = make_input(width=None, height=None)

    assert image_input.longest_side is None
    assert not should_transform(
        image_input, ThumbnailOptions(target_size=10), ImageType.PNG
    )


# ============================================================================
# square
# ============================================================================


def test_square_on_non_square_image():
    assert should_transform(make_input(), ThumbnailOptions(square=True), ImageType.PNG)


def test_square_on_square_image():
    image_input = make_input(width=100, height=100)

    assert not should_transform(image_input, ThumbnailOptions(square=True), ImageType.PNG)


def test_square_skipped_when_a_dimension_is_unknown():
    image_input = make_input(width=400, height=None)

    assert not should_transform(image_input, ThumbnailOptions(square=True), ImageType.PNG)


# ============================================================================
# output_type / force
# ============================================================================


def test_output_type_differs_from_input():
    options = ThumbnailOptions(output_type="jpeg")

    assert should_transform(make_input(), options, ImageType.JPEG)


def test_output_type_matching_input():
    options = ThumbnailOptions(output_type="png")

    assert not should_transform(make_input(), options, ImageType.PNG)


def test_force_with_unknown_dimensions():
    image_input = make_input(width=None, height=None)

    assert should_transform(image_input, ThumbnailOptions(force=True), ImageType.PNG)
