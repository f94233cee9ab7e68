# geowords/region.py
import math

from attrs import frozen

from .errors import ConfigError

METERS_PER_DEGREE = 111320  # approximate meters per degree of latitude


@frozen
class RegionConfig:
    """Axis-aligned bounding box addressed by the grid, and its cell size."""

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float
    cell_size_meters: float
    meters_per_degree: float = METERS_PER_DEGREE
    """Meters per degree of latitude, also used for longitude at the equator."""

    def __attrs_post_init__(self):
        values = (self.min_lat, self.max_lat, self.min_lng, self.max_lng,
                  self.cell_size_meters, self.meters_per_degree)
        if not all(
            isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)
            for v in values
        ):
            raise ConfigError(f"Region values must be finite numbers: {self}")
        if not self.min_lat < self.max_lat:
            raise ConfigError(f"min_lat ({self.min_lat}) must be below max_lat ({self.max_lat})")
        if not self.min_lng < self.max_lng:
            raise ConfigError(f"min_lng ({self.min_lng}) must be below max_lng ({self.max_lng})")
        if self.min_lat < -90 or self.max_lat > 90:
            raise ConfigError("Region latitudes must lie within [-90, 90]")
        if self.min_lng < -180 or self.max_lng > 180:
            raise ConfigError("Region longitudes must lie within [-180, 180]")
        if self.cell_size_meters <= 0:
            raise ConfigError(f"cell_size_meters must be positive, got {self.cell_size_meters}")
        if self.meters_per_degree <= 0:
            raise ConfigError(f"meters_per_degree must be positive, got {self.meters_per_degree}")

    @property
    def lat_span(self) -> float:
        return self.max_lat - self.min_lat

    @property
    def lng_span(self) -> float:
        return self.max_lng - self.min_lng

    @property
    def reference_lat(self) -> float:
        """Latitude at which east-west cell widths are fixed: the region's midline."""
        return (self.min_lat + self.max_lat) / 2

    def contains(self, lat: float, lng: float) -> bool:
        """Minimum edges are inside the region, maximum edges are not."""
        return self.min_lat <= lat < self.max_lat and self.min_lng <= lng < self.max_lng


# India bounding box with 3x3 meter cells
INDIA_REGION = RegionConfig(
    min_lat=6.5,
    max_lat=37.6,
    min_lng=68.7,
    max_lng=97.25,
    cell_size_meters=3,
)
