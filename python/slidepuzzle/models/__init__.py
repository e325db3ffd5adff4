from slidepuzzle.models.board import EMPTY, Board, Cell, Direction
from slidepuzzle.models.regions import ImageRegion, tile_regions

__all__ = ["EMPTY", "Board", "Cell", "Direction", "ImageRegion", "tile_regions"]
