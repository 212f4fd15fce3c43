from typing import Callable, List, Optional, Tuple
import numpy as np


DEFAULT_SIZE = (640, 480)

Geometry = Callable[..., np.ndarray]


class InvalidDimensionError(ValueError):
    """Raised when a grid is requested with a non-positive width or height."""


def no_obstacles(x, y, width, height):
    """Geometry with no wall cells at all."""
    return np.zeros(np.broadcast(x, y).shape, dtype=bool)


class GridDomain:
    """
    Uniform 2D grid with a static obstacle mask.

    Holds the grid size, the wall mask computed once from a geometry
    predicate, and the sources/listeners registered on the grid.
    Fields defined on this domain are arrays of shape ``(height, width)``
    indexed ``[y, x]``, so the flattened index of cell ``(x, y)`` is
    ``y * width + x``.

    Parameters
    ----------
    width : int
        Number of cells along x.
    height : int
        Number of cells along y.
    geometry : callable, optional
        Predicate ``(x, y, width, height) -> bool`` marking wall cells.
        Evaluated once on integer coordinate arrays. Defaults to
        :func:`no_obstacles`.
    fill_default_size : bool, default=False
        If True, a zero width or height is replaced by the default
        640x480 grid instead of raising. Negative sizes always raise.

    Attributes
    ----------
    shape : tuple of int
        ``(height, width)``.
    is_wall : np.ndarray
        Read-only boolean array, True where a cell is an obstacle.
    mask : np.ndarray
        Read-only boolean array, True where a cell takes part in propagation.
    sources : list
        Registered source objects.
    listeners : list
        Registered listener objects.
    """

    def __init__(
        self,
        width: int,
        height: int,
        geometry: Optional[Geometry] = None,
        fill_default_size: bool = False
    ) -> None:
        width, height = int(width), int(height)
        if width < 0 or height < 0:
            raise InvalidDimensionError(
                f"Grid dimensions must not be negative, got {width}x{height}."
            )
        if fill_default_size and (width == 0 or height == 0):
            width, height = DEFAULT_SIZE
        if width <= 0 or height <= 0:
            raise InvalidDimensionError(
                f"Grid dimensions must be positive, got {width}x{height}."
            )

        self.width = width
        self.height = height
        self.shape: Tuple[int, int] = (height, width)
        self.geometry = geometry if geometry is not None else no_obstacles

        X, Y = np.meshgrid(np.arange(width), np.arange(height))
        walls = np.asarray(self.geometry(X, Y, width, height), dtype=bool)
        self.is_wall = np.broadcast_to(walls, self.shape).copy()
        self.is_wall.flags.writeable = False
        self.mask = ~self.is_wall
        self.mask.flags.writeable = False

        self.sources: List = []
        self.listeners: List = []

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def wall_count(self) -> int:
        return int(self.is_wall.sum())

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        """Flat row-major index of cell (x, y)."""
        if not self.contains(x, y):
            raise ValueError(f"Cell ({x}, {y}) lies outside the {self.width}x{self.height} grid.")
        return y * self.width + x

    def cell_to_index(self, pos) -> Tuple[int, int]:
        """
        Convert an ``(x, y)`` cell position to an array index.

        Parameters
        ----------
        pos : sequence of int
            Cell coordinates ``(x, y)``.

        Returns
        -------
        tuple of int
            ``(y, x)``, suitable for indexing fields on this domain.
        """
        x, y = (int(p) for p in pos)
        if not self.contains(x, y):
            raise ValueError(f"Cell ({x}, {y}) lies outside the {self.width}x{self.height} grid.")
        return (y, x)

    def add_source(self, source) -> None:
        """
        Register a source in the domain.

        Parameters
        ----------
        source : HarmonicSource
            Source object to register.
        """
        source.register(self)
        self.sources.append(source)

    def add_listener(self, listener) -> None:
        """
        Register a listener in the domain.

        Parameters
        ----------
        listener : Listener
            Listener object to register.
        """
        listener.register(self)
        self.listeners.append(listener)
