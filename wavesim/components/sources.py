from typing import List, Tuple
import numpy as np


class Source:
    """
    Abstract base class for field sources.

    A source overwrites field cells after every buffer rotation rather
    than adding a forcing term.

    Attributes
    ----------
    pos : tuple of int
        Cell position ``(x, y)``.
    injection_points : list of tuple
        Array indices ``(y, x)`` written by the source, set upon registration.
    enabled : bool
        Disabled sources are skipped by :meth:`inject`.
    """
    def __init__(self, pos, enabled: bool = True):
        self.pos = tuple(int(p) for p in pos)
        self.enabled = enabled
        self.injection_points: List[Tuple[int, int]] = []

    def register(self, domain) -> None:
        """
        Calculates the array index based on the domain geometry.
        Default implementation registers a single point source.
        """
        idx = domain.cell_to_index(self.pos)

        if domain.is_wall[idx]:
            print(f"⚠️ Warning: Source at {self.pos} is inside a wall!")

        self.injection_points = [idx]

    def value(self, t: float) -> float:
        """Return the raw signal amplitude at time t."""
        raise NotImplementedError

    def inject(self, buffers, t: float) -> None:
        raise NotImplementedError


class HarmonicSource(Source):
    """
    Continuous sinusoidal point excitation.

    Writes ``amplitude * sin(t * angular_rate)`` into ``curr`` and the
    phase-shifted ``amplitude * sin(t * angular_rate + phase_offset)``
    into ``last``, which seeds the wave with a velocity at the source
    cell as well as a displacement.

    Parameters
    ----------
    pos : sequence of int
        Cell position ``(x, y)``.
    amplitude : float, default=1.0
        Peak value written to the field.
    angular_rate : float, default=1.0
        Angular frequency in radians per second of clock time.
    phase_offset : float, default=-0.5
        Phase of the ``last`` sample relative to ``curr``, in radians.
    """
    def __init__(
        self,
        pos,
        amplitude: float = 1.0,
        angular_rate: float = 1.0,
        phase_offset: float = -0.5,
        enabled: bool = True
    ) -> None:
        super().__init__(pos, enabled)
        self.amplitude = amplitude
        self.angular_rate = angular_rate
        self.phase_offset = phase_offset

    def value(self, t: float, phase: float = 0.0) -> float:
        return self.amplitude * np.sin(t * self.angular_rate + phase)

    def inject(self, buffers, t: float) -> None:
        if not self.enabled:
            return
        for idx in self.injection_points:
            buffers.curr[idx] = self.value(t)
            buffers.last[idx] = self.value(t, self.phase_offset)
