from enum import Enum
from typing import Tuple, Union
import numpy as np


class BoundaryPolicy(Enum):
    """
    Value substituted for a neighbour that is off the grid or a wall.

    WALL   : fixed zero (Dirichlet).
    FOLLOW : the cell's own value (reflecting, Neumann-like).
    ANTI   : the negated cell value (anti-symmetric reflection).
    """
    WALL = 'wall'
    FOLLOW = 'follow'
    ANTI = 'anti'

    @classmethod
    def coerce(cls, policy: Union['BoundaryPolicy', str]) -> 'BoundaryPolicy':
        if isinstance(policy, cls):
            return policy
        try:
            return cls(str(policy).lower())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown boundary policy {policy!r}. Expected one of: {valid}.") from None

    def substitute(self, value):
        """Boundary value for a cell holding ``value`` (scalar or array)."""
        if self is BoundaryPolicy.WALL:
            return np.zeros_like(value) if isinstance(value, np.ndarray) else 0.0
        if self is BoundaryPolicy.FOLLOW:
            return value
        return -value


class BoundaryResolver:
    """
    Resolves the four cardinal neighbour values of a cell.

    A neighbour contributes its own field value only when it is inside
    the grid and not a wall. Otherwise the policy's boundary value for
    the centre cell is used instead, so a wall's stored value is never
    read as a contribution.

    Parameters
    ----------
    domain : GridDomain
        Domain providing the grid size and the obstacle mask.
    policy : BoundaryPolicy or str
        Substitution rule for missing neighbours.

    Attributes
    ----------
    open_up, open_down, open_left, open_right : np.ndarray
        Boolean arrays, True where the neighbour in that direction
        exists and is not a wall. Computed once from the immutable mask.
    """

    def __init__(self, domain, policy: Union[BoundaryPolicy, str] = BoundaryPolicy.WALL) -> None:
        self.domain = domain
        self.policy = BoundaryPolicy.coerce(policy)
        self._compile_open_neighbors()

    def _compile_open_neighbors(self) -> None:
        air = self.domain.mask
        shape = self.domain.shape

        self.open_up = np.zeros(shape, dtype=bool)
        self.open_down = np.zeros(shape, dtype=bool)
        self.open_left = np.zeros(shape, dtype=bool)
        self.open_right = np.zeros(shape, dtype=bool)

        self.open_up[1:, :] = air[:-1, :]
        self.open_down[:-1, :] = air[1:, :]
        self.open_left[:, 1:] = air[:, :-1]
        self.open_right[:, :-1] = air[:, 1:]

    def boundary_value(self, curr: np.ndarray, x: int, y: int) -> float:
        return self.policy.substitute(float(curr[y, x]))

    def resolve_neighbors(self, curr: np.ndarray, x: int, y: int) -> Tuple[float, float, float, float]:
        """
        Neighbour values of a single cell.

        Parameters
        ----------
        curr : np.ndarray
            Current field, shape ``(height, width)``.
        x, y : int
            Cell coordinates.

        Returns
        -------
        tuple of float
            ``(up, down, left, right)`` where up is ``y-1`` and left is ``x-1``.
        """
        bval = self.boundary_value(curr, x, y)

        u = float(curr[y - 1, x]) if self.open_up[y, x] else bval
        d = float(curr[y + 1, x]) if self.open_down[y, x] else bval
        l = float(curr[y, x - 1]) if self.open_left[y, x] else bval
        r = float(curr[y, x + 1]) if self.open_right[y, x] else bval

        return u, d, l, r

    def neighbor_fields(self, curr: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """
        Neighbour values of every cell at once.

        Same rule as :meth:`resolve_neighbors`, evaluated over the whole
        grid with shifted copies of ``curr``.

        Returns
        -------
        tuple of np.ndarray
            ``(up, down, left, right)`` arrays shaped like ``curr``.
        """
        bval = self.policy.substitute(curr)

        shifted = np.zeros_like(curr)
        shifted[1:, :] = curr[:-1, :]
        u = np.where(self.open_up, shifted, bval)

        shifted = np.zeros_like(curr)
        shifted[:-1, :] = curr[1:, :]
        d = np.where(self.open_down, shifted, bval)

        shifted = np.zeros_like(curr)
        shifted[:, 1:] = curr[:, :-1]
        l = np.where(self.open_left, shifted, bval)

        shifted = np.zeros_like(curr)
        shifted[:, :-1] = curr[:, 1:]
        r = np.where(self.open_right, shifted, bval)

        return u, d, l, r
