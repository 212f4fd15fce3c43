import numpy as np


def _readonly(a: np.ndarray) -> np.ndarray:
    view = a.view()
    view.flags.writeable = False
    return view


class FieldSnapshot:
    """
    Read-only view of the current field and the obstacle mask.

    The arrays share memory with the solver, so their contents change
    on the next ``step()``. Use :meth:`copy` to keep a frame around.

    Attributes
    ----------
    width, height : int
        Grid dimensions.
    field : np.ndarray
        Current field ``curr``, shape ``(height, width)``, not writeable.
    walls : np.ndarray
        Obstacle mask, same shape, not writeable.
    steps : int
        Number of completed steps when the snapshot was taken.
    """

    def __init__(self, field: np.ndarray, walls: np.ndarray, steps: int = 0) -> None:
        self.field = _readonly(field)
        self.walls = _readonly(walls)
        self.height, self.width = self.field.shape
        self.steps = steps

    @property
    def shape(self):
        return self.field.shape

    def value(self, x: int, y: int) -> float:
        return float(self.field[y, x])

    def is_wall(self, x: int, y: int) -> bool:
        return bool(self.walls[y, x])

    def copy(self) -> 'FieldSnapshot':
        """Detached snapshot that no longer tracks the solver's buffers."""
        return FieldSnapshot(self.field.copy(), self.walls.copy(), self.steps)

    def masked(self) -> np.ndarray:
        """Copy of the field with wall cells set to NaN, for plotting."""
        out = np.array(self.field, dtype=float)
        out[self.walls] = np.nan
        return out
