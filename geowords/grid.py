# geowords/grid.py
import math

from attrs import frozen

from .errors import OutOfBoundsError, RangeError
from .region import RegionConfig


@frozen
class Cell:
    """One grid square. Row 0 is the southern edge, column 0 the western edge."""

    row: int
    column: int


@frozen
class Coordinates:
    latitude: float
    longitude: float

    def as_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}


@frozen
class GridExtent:
    """Number of cells along each axis of the region."""

    row_count: int
    column_count: int

    @property
    def cell_count(self) -> int:
        return self.row_count * self.column_count

    def contains(self, cell: Cell) -> bool:
        return 0 <= cell.row < self.row_count and 0 <= cell.column < self.column_count


def compute_extent(region: RegionConfig) -> GridExtent:
    """
    Work out how many cells span the region at its cell size.

    East-west distances are scaled by cos(reference_lat) using the region's
    midline, so the column count is fixed once for the whole grid rather than
    varying with the latitude being indexed.
    """
    lat_meters = region.lat_span * region.meters_per_degree
    lng_meters = (
        region.lng_span
        * region.meters_per_degree
        * math.cos(math.radians(region.reference_lat))
    )
    row_count = max(1, math.floor(lat_meters / region.cell_size_meters))
    column_count = max(1, math.floor(lng_meters / region.cell_size_meters))
    return GridExtent(row_count=row_count, column_count=column_count)


class GridIndexer:
    """
    Locates coordinates on the fixed grid covering a region.

    Every cell spans the same number of degrees in each direction, so any
    coordinate inside a cell maps to the same cell and decodes to its center.
    """

    def __init__(self, region: RegionConfig):
        self.region = region
        self.extent = compute_extent(region)
        self.cell_height = region.lat_span / self.extent.row_count
        """Height of a cell in degrees of latitude"""
        self.cell_width = region.lng_span / self.extent.column_count
        """Width of a cell in degrees of longitude"""

    def _check_bounds(self, lat: float, lng: float):
        region = self.region
        if region.contains(lat, lng):
            return
        # name the violated bound; negated comparisons so NaN is caught too
        if not lat >= region.min_lat:
            raise OutOfBoundsError(lat, lng, "min_lat", region.min_lat)
        if not lat < region.max_lat:
            raise OutOfBoundsError(lat, lng, "max_lat", region.max_lat)
        if not lng >= region.min_lng:
            raise OutOfBoundsError(lat, lng, "min_lng", region.min_lng)
        if not lng < region.max_lng:
            raise OutOfBoundsError(lat, lng, "max_lng", region.max_lng)

    def _check_cell(self, cell: Cell):
        if not self.extent.contains(cell):
            raise RangeError(
                f"Cell ({cell.row}, {cell.column}) is outside the "
                f"{self.extent.row_count}x{self.extent.column_count} grid",
                cell,
            )

    def coord_to_cell(self, lat: float, lng: float) -> Cell:
        """
        Find the cell containing a coordinate.

        Args:
            lat: The latitude coordinate.
            lng: The longitude coordinate.

        Returns:
            The Cell the coordinate falls in.

        Raises:
            OutOfBoundsError: If the coordinate is outside the region. Minimum
                edges are inclusive and maximum edges exclusive.
        """
        self._check_bounds(lat, lng)

        row = math.floor((lat - self.region.min_lat) / self.cell_height)
        column = math.floor((lng - self.region.min_lng) / self.cell_width)

        # float rounding just below a max edge can land one past the last cell
        row = min(row, self.extent.row_count - 1)
        column = min(column, self.extent.column_count - 1)

        return Cell(row=row, column=column)

    def cell_to_coord(self, cell: Cell) -> Coordinates:
        """Return the geometric center of a cell."""
        self._check_cell(cell)
        return Coordinates(
            latitude=self.region.min_lat + (cell.row + 0.5) * self.cell_height,
            longitude=self.region.min_lng + (cell.column + 0.5) * self.cell_width,
        )

    def cell_bounds(self, cell: Cell) -> tuple[float, float, float, float]:
        """Edges of a cell as (south, west, north, east)."""
        self._check_cell(cell)
        south = self.region.min_lat + cell.row * self.cell_height
        west = self.region.min_lng + cell.column * self.cell_width
        return south, west, south + self.cell_height, west + self.cell_width


class CellLinearizer:
    """Numbers the cells of a grid in row-major order."""

    def __init__(self, extent: GridExtent):
        self.extent = extent

    def to_linear(self, cell: Cell) -> int:
        if not self.extent.contains(cell):
            raise RangeError(
                f"Cell ({cell.row}, {cell.column}) is outside the "
                f"{self.extent.row_count}x{self.extent.column_count} grid",
                cell,
            )
        return cell.row * self.extent.column_count + cell.column

    def from_linear(self, idx: int) -> Cell:
        if not 0 <= idx < self.extent.cell_count:
            raise RangeError(
                f"Linear index {idx} is outside [0, {self.extent.cell_count})", idx
            )
        row, column = divmod(idx, self.extent.column_count)
        return Cell(row=row, column=column)
