from typing import Callable, Optional, Union
import numpy as np

from wavesim.core import PDESolver
from wavesim.core.boundary import BoundaryPolicy, BoundaryResolver
from wavesim.core.domain import GridDomain


# Leapfrog with a 5-point Laplacian is stable for coeff <= 1/2 in 2D.
STABILITY_LIMIT = 0.5


class Wave(PDESolver):
    """
    Explicit solver for the 2D scalar wave equation.

    Solves ∂²u/∂t² = c²∇²u with the leapfrog scheme

        u^{n+1} = 2u^n - u^{n-1} + coeff * (l + u + r + d - 4u^n)

    where ``coeff = (c² * Dx² / Dt²)²`` and the four neighbour values
    come from a :class:`BoundaryResolver`. Wall cells are never updated.
    Parameters are trusted as given; an unstable choice only produces a
    warning and is then left to diverge.

    Parameters
    ----------
    domain : GridDomain
        Domain with obstacle mask and registered sources/listeners.
    wave_speed_squared : float, default=0.5
        c².
    dx_squared : float, default=1.0
        Grid spacing squared.
    dt_squared : float, default=1.0
        Time step squared.
    boundary_policy : BoundaryPolicy or str, default='wall'
        Value substituted for off-grid and wall neighbours.
    clock : callable, optional
        Monotonic seconds source for the sources. Defaults to ``time.monotonic``.

    Attributes
    ----------
    coeff : float
        Laplacian coefficient of the update rule.
    resolver : BoundaryResolver
        Neighbour resolution for the chosen policy.
    """

    def __init__(
        self,
        domain: GridDomain,
        wave_speed_squared: float = 0.5,
        dx_squared: float = 1.0,
        dt_squared: float = 1.0,
        boundary_policy: Union[BoundaryPolicy, str] = BoundaryPolicy.WALL,
        clock: Optional[Callable[[], float]] = None
    ) -> None:
        super().__init__(domain, clock)

        self.c2 = float(wave_speed_squared)
        self.dx2 = float(dx_squared)
        self.dt2 = float(dt_squared)
        self.coeff = (self.c2 * (self.dx2 / self.dt2)) ** 2

        self.resolver = BoundaryResolver(domain, boundary_policy)

        if not self.is_stable:
            print(f"⚠️ Warning: coefficient {self.coeff:.3g} exceeds the stability "
                  f"limit {STABILITY_LIMIT}. The field is expected to diverge.")

    @property
    def boundary_policy(self) -> BoundaryPolicy:
        return self.resolver.policy

    @property
    def is_stable(self) -> bool:
        return self.coeff <= STABILITY_LIMIT

    def compute_next(self) -> None:
        """
        Fill ``next`` for every non-wall cell from ``curr`` and ``last``.

        Reads only ``curr``/``last`` and writes only ``next``, so every
        cell sees the pre-step state.
        """
        curr = self.buffers.curr
        last = self.buffers.last
        air = self.domain.mask

        u, d, l, r = self.resolver.neighbor_fields(curr)
        lap = l + u + r + d - 4 * curr
        update = 2 * curr - last + self.coeff * lap

        np.copyto(self.buffers.next, update, where=air)

    def cell_update(self, x: int, y: int) -> float:
        """
        Next value of a single cell, computed with the scalar resolver.

        Mirrors :meth:`compute_next` for one cell without touching the
        buffers.
        """
        ic = float(self.buffers.curr[y, x])
        il = float(self.buffers.last[y, x])
        u, d, l, r = self.resolver.resolve_neighbors(self.buffers.curr, x, y)
        return 2 * ic - il + self.coeff * (l + u + r + d - 4 * ic)
