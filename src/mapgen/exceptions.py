"""Custom exceptions for terrain generation."""


class TerrainError(Exception):
    """Base exception for terrain generation errors."""

    pass


class InvalidDimensionError(TerrainError):
    """Raised when width or height is not positive."""

    pass


class InvalidScaleError(TerrainError):
    """Raised when a noise scale is not positive."""

    pass


class InvalidOctavesError(TerrainError):
    """Raised when the octave count is negative."""

    pass


class InvalidNoiseParameterError(TerrainError):
    """Raised when persistence, lacunarity or the fill threshold is out of range."""

    pass


class InvalidBorderConfigError(TerrainError):
    """Raised when border shaping parameters cannot produce a valid field."""

    pass


class InvalidRiverConfigError(TerrainError):
    """Raised when river carving parameters are out of range."""

    pass


class InvalidRegionTableError(TerrainError):
    """Raised when the region threshold table is unusable."""

    pass


class UnclassifiedCellError(TerrainError):
    """Raised when a cell exceeds every region threshold under the strict policy."""

    def __init__(self, count: int, max_value: float, top_threshold: float):
        self.count = count
        self.max_value = max_value
        self.top_threshold = top_threshold
        super().__init__(
            f"{count} cell(s) exceed the highest region threshold "
            f"{top_threshold:.4f} (max value {max_value:.4f})"
        )
