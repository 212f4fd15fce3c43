from typing import Tuple
import numpy as np


class FieldBuffers:
    """
    The three time levels of a leapfrog scheme.

    ``last`` holds t-1, ``curr`` holds t and ``next`` is scratch space
    for t+1. All three are allocated once and reused every step.

    Parameters
    ----------
    shape : tuple of int
        ``(height, width)`` of the grid.
    """

    def __init__(self, shape: Tuple[int, int]) -> None:
        self.shape = tuple(shape)
        self.last = np.zeros(self.shape, dtype=float)
        self.curr = np.zeros(self.shape, dtype=float)
        self.next = np.zeros(self.shape, dtype=float)

    def rotate(self) -> None:
        """
        Promote ``next`` to ``curr`` and ``curr`` to ``last``.

        Done by copying into the existing arrays, so ``next`` stays a
        distinct buffer and never aliases the new ``curr``.
        """
        np.copyto(self.last, self.curr)
        np.copyto(self.curr, self.next)

    def zero(self) -> None:
        self.last.fill(0.0)
        self.curr.fill(0.0)
        self.next.fill(0.0)
