from typing import Callable, Optional
import time

from wavesim.core.domain import GridDomain
from wavesim.core.fields import FieldBuffers
from wavesim.core.snapshot import FieldSnapshot


class PDESolver:
    """
    Base class for explicit time-stepping solvers on a GridDomain.

    Owns the field buffers and the clock reference used by sources.
    Child classes implement the update rule in :meth:`compute_next`.

    Parameters
    ----------
    domain : GridDomain
        Computational domain with registered sources/listeners.
    clock : callable, optional
        Zero-argument callable returning monotonic seconds.
        Defaults to ``time.monotonic``.

    Attributes
    ----------
    domain : GridDomain
        Reference to the computational domain.
    buffers : FieldBuffers
        ``last``/``curr``/``next`` field arrays.
    steps : int
        Number of completed steps.
    t : float
        Elapsed seconds used for the most recent source injection.
    """

    def __init__(
        self,
        domain: GridDomain,
        clock: Optional[Callable[[], float]] = None
    ) -> None:
        self.domain = domain
        self.clock = clock if clock is not None else time.monotonic
        self.buffers = FieldBuffers(domain.shape)
        self.steps = 0
        self.t = 0.0
        self.t0 = self.clock()

    def elapsed(self) -> float:
        """Seconds since the clock reference was captured."""
        return self.clock() - self.t0

    def reset(self) -> None:
        """
        Reset simulation to initial state.

        Zeroes the field buffers, restarts the clock and clears listener
        history while preserving domain geometry and sources.
        """
        self.buffers.zero()
        self.steps = 0
        self.t = 0.0
        self.t0 = self.clock()
        for listener in self.domain.listeners:
            listener.reset()
        print("Solver reset to t=0.0s.")

    def compute_next(self) -> None:
        """Fill ``buffers.next`` from the current state. Must be implemented by child classes."""
        raise NotImplementedError("Child solver must implement compute_next")

    def inject_sources(self) -> None:
        """Overwrite source cells in ``curr``/``last`` after rotation."""
        self.t = self.elapsed()
        for source in self.domain.sources:
            source.inject(self.buffers, self.t)

    def step(self) -> None:
        """
        Advance simulation by one time step.

        Computes ``next``, rotates the buffers, injects sources and
        records field values at all registered listeners.
        """
        self.compute_next()
        self.buffers.rotate()
        self.inject_sources()
        self.steps += 1

        for listener in self.domain.listeners:
            listener.record(self.t, self.buffers.curr)

    def run(self, n_steps: int) -> None:
        for _ in range(int(n_steps)):
            self.step()

    def snapshot(self) -> FieldSnapshot:
        """Read-only view of ``curr`` and the obstacle mask."""
        return FieldSnapshot(self.buffers.curr, self.domain.is_wall, self.steps)
