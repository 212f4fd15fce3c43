"""
Obstacle geometries for :class:`wavesim.core.GridDomain`.

Every geometry is a predicate ``(x, y, width, height) -> bool`` that
works on scalars as well as on the integer coordinate arrays the
domain evaluates it on.
"""
import numpy as np

from wavesim.core.domain import no_obstacles


def parabolic_wedge(x, y, width, height):
    """
    Parabolic wedge filling part of the left quarter of the grid.

    A cell is a wall when ``(y/height - 0.5)² * 8 > x/width`` and it lies
    in the first ``width // 4`` columns.
    """
    fx = np.asarray(x, dtype=float) / float(width)
    fy = np.asarray(y, dtype=float) / float(height)
    return np.logical_and((fy - 0.5) ** 2 * 8 > fx, np.asarray(x) < width // 4)


def rectangle(x0, y0, x1, y1):
    """Solid block covering cells with x0 <= x < x1 and y0 <= y < y1."""
    def geometry(x, y, width, height):
        return (np.asarray(x) >= x0) & (np.asarray(x) < x1) & \
               (np.asarray(y) >= y0) & (np.asarray(y) < y1)

    return geometry


def disc(cx, cy, radius):
    """Solid disc of the given radius in cells."""
    def geometry(x, y, width, height):
        dist_sq = (np.asarray(x) - cx) ** 2 + (np.asarray(y) - cy) ** 2
        return dist_sq <= radius ** 2

    return geometry


def double_slit(column, slit_width, separation, thickness=1):
    """
    Vertical barrier with two slits, centred on the middle row.

    Parameters
    ----------
    column : int
        First column of the barrier.
    slit_width : float
        Size of each aperture in cells.
    separation : float
        Centre-to-centre distance between the slits.
    thickness : int, default=1
        Barrier thickness in columns.
    """
    def geometry(x, y, width, height):
        x = np.asarray(x)
        y = np.asarray(y, dtype=float)
        cy = height / 2.0

        in_barrier = (x >= column) & (x < column + thickness)
        in_slit1 = np.abs(y - (cy + separation / 2.0)) < slit_width / 2.0
        in_slit2 = np.abs(y - (cy - separation / 2.0)) < slit_width / 2.0

        return in_barrier & ~(in_slit1 | in_slit2)

    return geometry


def union(*geometries):
    """Geometry whose walls are the walls of any of the given geometries."""
    def geometry(x, y, width, height):
        walls = no_obstacles(x, y, width, height)
        for g in geometries:
            walls = walls | np.asarray(g(x, y, width, height), dtype=bool)
        return walls

    return geometry
