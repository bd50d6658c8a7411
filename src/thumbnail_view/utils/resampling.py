"""Named resampling filters used when scaling."""

from PIL import Image

DEFAULT_SCALING_QTYPE = "mixing"

# Legacy scaling names map onto Pillow filters
RESAMPLING_FILTERS: dict[str, Image.Resampling] = {
    "mixing": Image.Resampling.BOX,
    "normal": Image.Resampling.BICUBIC,
    "preview": Image.Resampling.NEAREST,
    "nearest": Image.Resampling.NEAREST,
    "box": Image.Resampling.BOX,
    "bilinear": Image.Resampling.BILINEAR,
    "hamming": Image.Resampling.HAMMING,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}


def resolve_resample(name: str) -> Image.Resampling:
    """Look up a Pillow resampling filter by name.

    Raises:
        ValueError: If the name is not a known scaling type
    """
    try:
        return RESAMPLING_FILTERS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown scaling type '{name}', expected one of: "
            + ", ".join(RESAMPLING_FILTERS)
        ) from None
