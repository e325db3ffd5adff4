"""Image slicing for tile artwork.

Regions use a bottom-left origin: grid row 0 (the top row) maps to the
highest band of the image.  Hosts with a top-left origin convert with
``ImageRegion.to_top_left``.
"""

from __future__ import annotations

from dataclasses import dataclass

from slidepuzzle.errors import ConfigError, InvalidDimensionsError


@dataclass(frozen=True)
class ImageRegion:
    x: int
    y: int
    width: int
    height: int

    def to_top_left(self, image_height: int) -> ImageRegion:
        """Return the same rectangle measured from the image's top edge."""
        return ImageRegion(
            x=self.x,
            y=image_height - self.y - self.height,
            width=self.width,
            height=self.height,
        )

    def centered_square(self) -> ImageRegion:
        """Return the largest square centred in this region.

        Hosts drawing square tiles crop to it so the artwork keeps its
        aspect ratio.
        """
        side = min(self.width, self.height)
        return ImageRegion(
            x=self.x + (self.width - side) // 2,
            y=self.y + (self.height - side) // 2,
            width=side,
            height=side,
        )


def tile_regions(
    cols: int, rows: int, image_width: int, image_height: int
) -> dict[int, ImageRegion]:
    """Map every home index (the empty one included) to its image region."""
    if cols < 1 or rows < 1 or cols * rows < 2:
        raise InvalidDimensionsError(cols, rows)
    tile_w = image_width // cols
    tile_h = image_height // rows
    if tile_w < 1 or tile_h < 1:
        raise ConfigError(
            f"Image {image_width}×{image_height} is too small for a "
            f"{cols}×{rows} grid."
        )

    regions: dict[int, ImageRegion] = {}
    for index in range(cols * rows):
        row, col = divmod(index, cols)
        regions[index] = ImageRegion(
            x=col * tile_w,
            y=(rows - 1 - row) * tile_h,
            width=tile_w,
            height=tile_h,
        )
    return regions
